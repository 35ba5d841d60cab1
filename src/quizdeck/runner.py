"""
Quiz Runner: asks every item of the session in order and keeps score.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from src.delivery.quiz_visuals import QuizTerminal, quiz_progress_text, quiz_summary_text
from src.quizdeck.session import QuizItem


@dataclass(frozen=True)
class QuizOutcome:
    """Final tally of a session."""
    score: int
    total: int


class QuizRunner:
    """Runs one session: no retries, no skipping."""

    def __init__(self, items: list[QuizItem], terminal: QuizTerminal):
        self.items = items
        self.terminal = terminal
        self.score = 0
        self.position = 0

    def run(self) -> QuizOutcome:
        total = len(self.items)
        logger.info(f"Starting quiz with {total} questions")

        for item in self.items:
            self.position += 1
            self.terminal.print(quiz_progress_text(item.chapter, self.position, total))
            if item.question.ask(self.terminal):
                self.score += 1

        outcome = QuizOutcome(score=self.score, total=total)
        logger.info(f"Quiz finished: {outcome.score}/{outcome.total}")

        self.terminal.print(quiz_summary_text(outcome.score, outcome.total))
        self.terminal.print("Press Enter to exit...")
        self.terminal.ask()
        return outcome
