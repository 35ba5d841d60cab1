"""
Matching questions.

A matching question (terms paired with definitions) is never asked as a
whole. expand_matching() turns it into one SingleMatchingQuestion per term;
each lists every definition of the question, in the original pair order,
and the user answers with the 1-based number of the right one.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator
from rich.console import Console
from rich.text import Text

from . import QuestionKind
from .base import AnswerResult, QuizQuestion

# Index used for unparseable or out-of-range input; never a valid 1-based answer
NO_MATCH = 0


class UnknownTermError(ValueError):
    """Raised when a term is not part of the matching question it is expanded from."""


class MatchingPair(BaseModel):
    """One term and its definition."""

    model_config = ConfigDict(frozen=True)

    term: str
    definition: str


class MatchingQuestion(BaseModel):
    """A prompt with an ordered list of term/definition pairs."""

    model_config = ConfigDict(frozen=True)

    question: str
    pairs: list[MatchingPair] = []

    @field_validator("pairs")
    @classmethod
    def _terms_unique(cls, pairs: list[MatchingPair]) -> list[MatchingPair]:
        seen: set[str] = set()
        for pair in pairs:
            if pair.term in seen:
                raise ValueError(f"duplicate term {pair.term!r}")
            seen.add(pair.term)
        return pairs

    @property
    def definitions(self) -> list[str]:
        return [pair.definition for pair in self.pairs]


class SingleMatchingQuestion(QuizQuestion):
    """Pick the definition of one term out of all definitions of its question."""

    kind: ClassVar[QuestionKind] = QuestionKind.MATCHING

    term: str
    definitions: list[str]
    correct_answer: str

    @classmethod
    def from_pairs(cls, term: str, pairs: list[MatchingPair]) -> "SingleMatchingQuestion":
        """
        Build the question for one term.

        Raises:
            UnknownTermError: If no pair has this term
        """
        correct_pair = next((pair for pair in pairs if pair.term == term), None)
        if correct_pair is None:
            raise UnknownTermError(f"Term {term!r} is not part of the matching question")
        return cls(
            term=correct_pair.term,
            definitions=[pair.definition for pair in pairs],
            correct_answer=correct_pair.definition,
        )

    def present(self, console: Console) -> None:
        console.print(
            self._question_panel(f"Choose the definition that matches the term: {self.term}")
        )
        for i, definition in enumerate(self.definitions, 1):
            console.print(Text(f"{i}. {definition}"))

    def parse_choice(self, user_answer: str) -> int:
        """1-based definition number, or NO_MATCH when not a valid number."""
        try:
            choice = int(user_answer.strip())
        except ValueError:
            return NO_MATCH
        if not 1 <= choice <= len(self.definitions):
            return NO_MATCH
        return choice

    def check(self, user_answer: str) -> AnswerResult:
        choice = self.parse_choice(user_answer)
        is_correct = choice != NO_MATCH and self.definitions[choice - 1] == self.correct_answer
        return AnswerResult(
            correct=is_correct,
            user_answer=user_answer,
            correct_answer=self.correct_answer,
        )


def expand_matching(question: MatchingQuestion) -> list[SingleMatchingQuestion]:
    """One SingleMatchingQuestion per pair, in pair order."""
    return [SingleMatchingQuestion.from_pairs(pair.term, question.pairs) for pair in question.pairs]
