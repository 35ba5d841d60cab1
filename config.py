"""
Configuration settings for the quizdeck trainer.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Question Bank
    # ========================================
    question_bank_path: str | None = Field(
        default=None,
        description="YAML question bank path (None for the bundled bank)",
    )

    # ========================================
    # Session Selection
    # ========================================
    select_all_token: str = Field(
        default="a",
        description="Input that selects every chapter or every question",
    )
    default_question_count: int = Field(
        default=5,
        ge=0,
        description="Question count used when the count input is not a number",
    )
    shuffle_seed: int | None = Field(
        default=None,
        description="Seed for the question pool shuffle (None for a random order)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
