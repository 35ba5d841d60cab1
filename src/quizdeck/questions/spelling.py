"""
Spelling question.

Shows three candidate spellings and expects the correct one typed out.
The candidates are distractors only: the answer does not have to be one
of them, and they are never checked against it.
"""

from typing import ClassVar

from pydantic import Field
from rich.console import Console
from rich.text import Text

from . import QuestionKind
from .base import AnswerResult, QuizQuestion, matches_ignoring_case


class SpellingQuestion(QuizQuestion):
    """Type the correct spelling after seeing three candidates."""

    kind: ClassVar[QuestionKind] = QuestionKind.SPELLING

    question: str
    options: list[str] = Field(min_length=3, max_length=3)
    answer: str

    def present(self, console: Console) -> None:
        console.print(self._question_panel(self.question))
        for option in self.options:
            console.print(Text(option))

    def check(self, user_answer: str) -> AnswerResult:
        is_correct = matches_ignoring_case(user_answer, self.answer)
        return AnswerResult(
            correct=is_correct,
            user_answer=user_answer.strip(),
            correct_answer=self.answer,
        )
