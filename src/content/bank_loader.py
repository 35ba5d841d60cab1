"""
Question bank loader.

Reads the YAML question bank and validates it into typed chapters.
Any problem with the document fails the whole load; there is no
partial bank.

Document shape:

    chapters:
      - chapter: 1
        multiple_choice: [{question, options: [4], answer: a-d}]
        matching: [{question, pairs: [{term, definition}]}]
        fill_in_the_blanks: [{question, answer}]
        spelling: [{question, options: [3], answer}]

Every question list is optional and defaults to empty.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.quizdeck.questions import (
    FillInTheBlankQuestion,
    MatchingQuestion,
    MultipleChoiceQuestion,
    QuestionKind,
    SpellingQuestion,
)

BUNDLED_BANK_PATH = Path(__file__).parent / "data" / "questions.yaml"


class QuestionBankError(Exception):
    """Raised when the question bank cannot be read or does not match the schema."""
    pass


class Chapter(BaseModel):
    """One chapter of the bank and its questions, by kind."""

    model_config = ConfigDict(frozen=True)

    chapter: int = Field(gt=0)
    multiple_choice: list[MultipleChoiceQuestion] = []
    matching: list[MatchingQuestion] = []
    fill_in_the_blanks: list[FillInTheBlankQuestion] = []
    spelling: list[SpellingQuestion] = []

    def question_counts(self) -> dict[str, int]:
        """Number of quiz items per kind (matching counts one per pair)."""
        return {
            QuestionKind.MULTIPLE_CHOICE.display_name: len(self.multiple_choice),
            QuestionKind.MATCHING.display_name: sum(len(m.pairs) for m in self.matching),
            QuestionKind.FILL_IN_THE_BLANK.display_name: len(self.fill_in_the_blanks),
            QuestionKind.SPELLING.display_name: len(self.spelling),
        }


class QuestionBank(BaseModel):
    """All chapters, in document order."""

    model_config = ConfigDict(frozen=True)

    chapters: list[Chapter]

    @field_validator("chapters")
    @classmethod
    def _chapter_ids_unique(cls, chapters: list[Chapter]) -> list[Chapter]:
        seen: set[int] = set()
        for chapter in chapters:
            if chapter.chapter in seen:
                raise ValueError(f"duplicate chapter {chapter.chapter}")
            seen.add(chapter.chapter)
        return chapters

    @property
    def chapter_ids(self) -> set[int]:
        return {chapter.chapter for chapter in self.chapters}


def parse_question_bank(text: str, source: str = "<string>") -> QuestionBank:
    """
    Parse and validate a YAML question bank document.

    Args:
        text: YAML document
        source: Name used in error messages

    Raises:
        QuestionBankError: If the YAML is malformed or does not match the schema
    """
    try:
        # Scalars stay strings; pydantic converts chapter ids
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise QuestionBankError(f"Failed to parse question bank {source}: {e}") from e

    try:
        return QuestionBank.model_validate(data)
    except ValidationError as e:
        raise QuestionBankError(f"Invalid question bank {source}:\n{e}") from e


def load_question_bank(path: Path | str | None = None) -> QuestionBank:
    """
    Load the question bank from a YAML file.

    Args:
        path: Bank file. Empty or None loads the bank bundled with the package.

    Raises:
        QuestionBankError: If the file cannot be read or is invalid
    """
    bank_path = Path(path) if path else BUNDLED_BANK_PATH

    try:
        text = bank_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise QuestionBankError(f"Cannot read question bank {bank_path}: {e}") from e

    bank = parse_question_bank(text, source=str(bank_path))
    logger.info(f"Loaded {len(bank.chapters)} chapters from {bank_path}")
    return bank
