"""
Multiple choice question.

- Presents a question with four lettered options (a-d).
- The typed letter is compared verbatim, so grading is case-sensitive.
"""

from typing import ClassVar, Literal

from pydantic import Field
from rich.console import Console
from rich.text import Text

from src.delivery.quiz_visuals import get_quiz_prompt

from . import QuestionKind
from .base import AnswerResult, QuizQuestion

OPTION_LETTERS = ("a", "b", "c", "d")


class MultipleChoiceQuestion(QuizQuestion):
    """A question with exactly four options and one answer letter."""

    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE

    question: str
    options: list[str] = Field(min_length=4, max_length=4)
    answer: Literal["a", "b", "c", "d"]

    def present(self, console: Console) -> None:
        console.print(self._question_panel(self.question))
        for letter, option in zip(OPTION_LETTERS, self.options):
            console.print(Text(f"{letter}. {option}"))

    def input_prompt(self) -> str:
        return get_quiz_prompt(self.kind.value, "(a-d)")

    def check(self, user_answer: str) -> AnswerResult:
        is_correct = user_answer == self.answer
        return AnswerResult(
            correct=is_correct,
            user_answer=user_answer,
            correct_answer=self.answer,
        )
