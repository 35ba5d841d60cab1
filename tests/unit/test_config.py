"""
Unit tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("QUESTION_BANK_PATH", "SELECT_ALL_TOKEN", "DEFAULT_QUESTION_COUNT",
                     "SHUFFLE_SEED", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.question_bank_path is None
        assert settings.select_all_token == "a"
        assert settings.default_question_count == 5
        assert settings.shuffle_seed is None
        assert settings.log_level == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("QUESTION_BANK_PATH", "/tmp/bank.yaml")
        monkeypatch.setenv("shuffle_seed", "12")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.question_bank_path == "/tmp/bank.yaml"
        assert settings.shuffle_seed == 12
        assert settings.log_level == "DEBUG"

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DEFAULT_QUESTION_COUNT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("DEFAULT_QUESTION_COUNT=10\nUNRELATED=1\n")

        assert Settings(_env_file=env_file).default_question_count == 10

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_negative_default_count(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_question_count=-1)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
