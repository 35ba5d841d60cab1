"""
Base protocol and types for quiz questions.
"""

from dataclasses import dataclass
from typing import ClassVar, Protocol

from loguru import logger
from pydantic import BaseModel, ConfigDict
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from src.delivery.quiz_visuals import QuizTerminal, get_quiz_prompt, quiz_result_text

from . import QuestionKind


@dataclass(frozen=True)
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    user_answer: str
    correct_answer: str


def matches_ignoring_case(user_answer: str, correct: str) -> bool:
    """Text answer grading: surrounding whitespace and letter case are ignored."""
    return user_answer.strip().lower() == correct.strip().lower()


class Askable(Protocol):
    """Anything the quiz runner can present and grade."""

    def ask(self, terminal: QuizTerminal) -> bool:
        """Present the question, read one answer, report and return correctness."""
        ...


class QuizQuestion(BaseModel):
    """
    Shared present-and-grade flow for all question kinds.

    Subclasses provide present() and check(); check() must be a pure
    function of the question and the raw answer.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[QuestionKind]

    def present(self, console: Console) -> None:
        """Display the question and any options."""
        raise NotImplementedError

    def input_prompt(self) -> str:
        return get_quiz_prompt(self.kind.value)

    def check(self, user_answer: str) -> AnswerResult:
        """Grade a raw answer string."""
        raise NotImplementedError

    def ask(self, terminal: QuizTerminal) -> bool:
        self.present(terminal.console)
        user_answer = terminal.ask(self.input_prompt())
        result = self.check(user_answer)
        logger.debug(
            f"{self.kind.value}: answered {result.user_answer!r}, "
            f"expected {result.correct_answer!r}, correct={result.correct}"
        )
        terminal.print(quiz_result_text(result.correct, result.correct_answer))
        return result.correct

    def _question_panel(self, body: str) -> Panel:
        return Panel(
            Text(body),
            title=f"[bold cyan]{self.kind.display_name}[/bold cyan]",
            border_style="cyan",
            box=box.HEAVY,
            padding=(0, 1),
        )
