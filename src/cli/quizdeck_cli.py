"""
QuizDeck CLI - chapter quiz trainer for the terminal.

Loads the question bank, asks which chapters and how many questions to
practice, runs the quiz and prints the score.

Usage:
    quizdeck                        # Start a quiz
    python -m src.cli.quizdeck_cli  # Same, from a checkout

Configuration comes from the environment or a .env file (see config.py),
e.g. QUESTION_BANK_PATH=my_bank.yaml or LOG_LEVEL=DEBUG.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

# Local imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config import Settings, get_settings
from src.content.bank_loader import QuestionBankError, load_question_bank
from src.delivery.quiz_visuals import QuizTerminal, quiz_error_panel
from src.quizdeck.runner import QuizRunner
from src.quizdeck.session import SessionBuilder

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quizdeck",
    help="Chapter quiz trainer for the terminal",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


def run_quiz(settings: Settings, terminal: QuizTerminal) -> int:
    """
    Run one full session.

    Returns:
        The number of correct answers

    Raises:
        QuestionBankError: If the question bank cannot be loaded
    """
    bank = load_question_bank(settings.question_bank_path)
    items = SessionBuilder(bank, terminal, settings=settings).build()
    outcome = QuizRunner(items, terminal).run()
    return outcome.score


# =============================================================================
# Commands
# =============================================================================


@app.command()
def start() -> None:
    """
    Start a quiz session.

    Pick chapters (comma-separated ids), then the number of questions,
    then answer each question as it is shown.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(quiz_error_panel(str(e), title="CONFIGURATION"))
        raise typer.Exit(1)
    configure_logging(settings.log_level)

    try:
        run_quiz(settings, QuizTerminal(console))
    except QuestionBankError as e:
        logger.error(f"Question bank failed to load: {e}")
        console.print(quiz_error_panel(str(e), title="QUESTION BANK"))
        raise typer.Exit(1)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
