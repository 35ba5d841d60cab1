"""
Fill-in-the-blank question.

Exact string match grading, ignoring letter case and surrounding whitespace.
"""

from typing import ClassVar

from rich.console import Console

from . import QuestionKind
from .base import AnswerResult, QuizQuestion, matches_ignoring_case


class FillInTheBlankQuestion(QuizQuestion):
    """A question answered by typing the missing word or phrase."""

    kind: ClassVar[QuestionKind] = QuestionKind.FILL_IN_THE_BLANK

    question: str
    answer: str

    def present(self, console: Console) -> None:
        console.print(self._question_panel(self.question))

    def check(self, user_answer: str) -> AnswerResult:
        is_correct = matches_ignoring_case(user_answer, self.answer)
        return AnswerResult(
            correct=is_correct,
            user_answer=user_answer.strip(),
            correct_answer=self.answer,
        )
