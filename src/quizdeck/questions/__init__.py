"""
Question types for QuizDeck sessions.

Each question kind (multiple choice, matching, etc.) has its own module with:
- present(): Display the question to the user
- input_prompt(): Prompt shown when reading the answer
- check(): Grade a raw answer
- ask(): Present, read, grade and report in one step
"""

from enum import Enum


class QuestionKind(str, Enum):
    """Supported question kinds in QuizDeck."""
    MULTIPLE_CHOICE = "multiple_choice"
    MATCHING = "matching"
    FILL_IN_THE_BLANK = "fill_in_the_blank"
    SPELLING = "spelling"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").upper()


# Imported after QuestionKind so the variant modules can reference it
from .base import AnswerResult, Askable, QuizQuestion
from .fill_in_the_blank import FillInTheBlankQuestion
from .matching import (
    MatchingPair,
    MatchingQuestion,
    SingleMatchingQuestion,
    UnknownTermError,
    expand_matching,
)
from .multiple_choice import MultipleChoiceQuestion
from .spelling import SpellingQuestion

__all__ = [
    "QuestionKind",
    "AnswerResult",
    "Askable",
    "QuizQuestion",
    "MultipleChoiceQuestion",
    "MatchingPair",
    "MatchingQuestion",
    "SingleMatchingQuestion",
    "UnknownTermError",
    "expand_matching",
    "FillInTheBlankQuestion",
    "SpellingQuestion",
]
