"""
QuizDeck Visual Components.

Color theme, prompts, and themed renderables for the terminal quiz,
plus the line-oriented terminal used to read answers.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.style import Style
from rich.table import Table
from rich.text import Text

# =============================================================================
# COLOR THEME
# =============================================================================

QUIZ_THEME = {
    "primary": "cyan",
    "success": "green",  # correct answers
    "error": "red",  # incorrect answers
    "highlight": "yellow",  # progress and score
    "dim": "bright_black",
}

STYLES = {
    "quiz_primary": Style(color=QUIZ_THEME["primary"], bold=True),
    "quiz_success": Style(color=QUIZ_THEME["success"], bold=True),
    "quiz_error": Style(color=QUIZ_THEME["error"], bold=True),
    "quiz_answer": Style(color=QUIZ_THEME["success"]),
    "quiz_highlight": Style(color=QUIZ_THEME["highlight"]),
    "quiz_highlight_bold": Style(color=QUIZ_THEME["highlight"], bold=True),
    "quiz_dim": Style(color=QUIZ_THEME["dim"]),
}


# =============================================================================
# PROMPTS
# =============================================================================

QUIZ_PROMPTS = {
    "multiple_choice": "Your answer",
    "matching": "Your answer (enter the number of the definition)",
    "fill_in_the_blank": "Your answer",
    "spelling": "Your answer",
    "chapters": "Selected chapters",
    "count": "Number of questions",
    "default": "Your answer",
}


def get_quiz_prompt(question_type: str, suffix: str = "") -> str:
    """
    Get the input prompt for a question type.

    Args:
        question_type: Prompt key (question kind or session step)
        suffix: Optional suffix like "(a-d)"

    Returns:
        Prompt string with markup
    """
    base = QUIZ_PROMPTS.get(question_type.lower(), QUIZ_PROMPTS["default"])
    if suffix:
        return f"[cyan]{base}[/cyan] {suffix}"
    return f"[cyan]{base}[/cyan]"


# =============================================================================
# RENDERABLES
# =============================================================================


def quiz_result_text(passed: bool, answer: str) -> Text:
    """Correctness message: green on success, red plus the expected answer otherwise."""
    content = Text()
    if passed:
        content.append("Correct!", style=STYLES["quiz_success"])
    else:
        content.append("Incorrect!", style=STYLES["quiz_error"])
        content.append(" The answer is ")
        content.append(answer, style=STYLES["quiz_answer"])
    content.append("\n")
    return content


def quiz_progress_text(chapter: int, position: int, total: int) -> Text:
    """Progress indicator shown before each question: Chapter X (i/total)."""
    content = Text("Chapter ")
    content.append(str(chapter), style=STYLES["quiz_highlight_bold"])
    content.append(" (")
    content.append(str(position), style=STYLES["quiz_highlight"])
    content.append("/")
    content.append(str(total), style=STYLES["quiz_highlight"])
    content.append(")")
    return content


def quiz_summary_text(score: int, total: int) -> Text:
    """Final tally line."""
    content = Text("You answered ")
    content.append(str(score), style=STYLES["quiz_highlight_bold"])
    content.append(" of ")
    content.append(str(total), style=STYLES["quiz_highlight_bold"])
    content.append(" questions correctly!")
    return content


def chapter_table(rows: Iterable[tuple[int, dict[str, int]]]) -> Table:
    """
    Table of available chapters with question counts per kind.

    Args:
        rows: (chapter id, {kind title: count}) pairs in display order
    """
    table = Table(box=box.MINIMAL, show_header=True, header_style="bold cyan")
    table.add_column("Chapter", style="yellow", justify="right")
    columns: list[str] = []

    materialized = list(rows)
    for _, counts in materialized:
        for title in counts:
            if title not in columns:
                columns.append(title)
    for title in columns:
        table.add_column(title, justify="right")

    for chapter_id, counts in materialized:
        table.add_row(str(chapter_id), *(str(counts.get(title, 0)) for title in columns))
    return table


def quiz_error_panel(message: str, title: str = "ERROR") -> Panel:
    """Red panel for fatal errors."""
    return Panel(
        Text(message, style=STYLES["quiz_error"]),
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
        box=box.HEAVY,
        padding=(1, 2),
    )


# =============================================================================
# TERMINAL
# =============================================================================


class QuizTerminal:
    """
    Line-oriented console used by questions and the session.

    Output goes through a rich Console; every read is one trimmed line.
    Passing a stream reads lines from it instead of stdin.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None):
        self.console = console or Console()
        self.stream = stream

    def print(self, *objects, **kwargs) -> None:
        self.console.print(*objects, **kwargs)

    def ask(self, prompt: str = "") -> str:
        """Read one line of input, trimmed. Empty input or end of input returns an empty string."""
        try:
            answer = Prompt.ask(
                prompt,
                console=self.console,
                default="",
                show_default=False,
                stream=self.stream,
            )
        except EOFError:
            self.console.print()
            return ""
        return answer.strip()
