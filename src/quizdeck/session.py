"""
Quiz Session: Builds the question pool for one run.

Steps:
1. Chapter selection (re-prompts until the selection is valid)
2. Pool assembly (flatten chapters, expand matching questions)
3. Size selection (everything in order, or a shuffled sample)
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from config import Settings, get_settings
from src.content.bank_loader import QuestionBank
from src.delivery.quiz_visuals import QuizTerminal, chapter_table, get_quiz_prompt
from src.quizdeck.questions import Askable, expand_matching


@dataclass(frozen=True, eq=False)
class QuizItem:
    """A question ready to be asked, tagged with its source chapter.

    Items compare by identity: two items are the same only if they are
    the same pool entry.
    """
    question: Askable
    chapter: int


def parse_chapter_selection(
    raw: str,
    available: set[int],
    select_all_token: str = "a",
) -> set[int] | None:
    """
    Parse a comma-separated chapter list.

    Tokens that are not non-negative integers are dropped. An input that
    drops to nothing gives an empty selection, which is valid.

    Returns:
        The selected chapter ids, or None if any of them is not available
    """
    if raw == select_all_token:
        return set(available)

    selected = {int(part.strip()) for part in raw.split(",") if part.strip().isdecimal()}
    if not selected <= available:
        return None
    return selected


def build_pool(bank: QuestionBank, selected: Iterable[int]) -> list[QuizItem]:
    """
    Flatten the selected chapters into quiz items.

    Chapters keep bank order. Within a chapter: multiple choice, matching
    (one item per pair), fill in the blanks, then spelling.
    """
    selected = set(selected)
    pool: list[QuizItem] = []

    for chapter in bank.chapters:
        if chapter.chapter not in selected:
            continue

        pool.extend(QuizItem(q, chapter.chapter) for q in chapter.multiple_choice)
        for matching in chapter.matching:
            pool.extend(QuizItem(q, chapter.chapter) for q in expand_matching(matching))
        pool.extend(QuizItem(q, chapter.chapter) for q in chapter.fill_in_the_blanks)
        pool.extend(QuizItem(q, chapter.chapter) for q in chapter.spelling)

    logger.debug(f"Assembled pool of {len(pool)} items from chapters {sorted(selected)}")
    return pool


def parse_question_count(
    raw: str,
    select_all_token: str = "a",
    default: int = 5,
) -> int | None:
    """
    Parse the requested number of questions.

    Returns:
        None for the select-all token, the count for a non-negative
        integer, otherwise the default
    """
    if raw == select_all_token:
        return None
    if raw.isdecimal():
        return int(raw)
    return default


def sample_pool(
    pool: list[QuizItem],
    count: int | None,
    rng: random.Random | None = None,
) -> list[QuizItem]:
    """
    Pick the items for the session.

    count=None keeps the whole pool in its original order. Otherwise a
    shuffled copy is truncated to count items; counts above the pool size
    are clamped.
    """
    if count is None:
        return list(pool)

    if count > len(pool):
        logger.warning(f"Requested {count} questions but only {len(pool)} available; using {len(pool)}")
        count = len(pool)

    shuffled = list(pool)
    (rng or random.Random()).shuffle(shuffled)
    return shuffled[:count]


class SessionBuilder:
    """Interactive chapter and size selection over a loaded question bank."""

    def __init__(
        self,
        bank: QuestionBank,
        terminal: QuizTerminal,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.bank = bank
        self.terminal = terminal
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.shuffle_seed)

    def select_chapters(self) -> set[int]:
        """Prompt until the user picks a valid set of chapters."""
        token = self.settings.select_all_token
        available = self.bank.chapter_ids

        while True:
            self.terminal.print(
                "Choose one or more chapters from the list below "
                f"(comma-separated, enter '{token}' to select all):"
            )
            self.terminal.print(
                chapter_table((c.chapter, c.question_counts()) for c in self.bank.chapters)
            )

            raw = self.terminal.ask(get_quiz_prompt("chapters"))
            selected = parse_chapter_selection(raw, available, token)
            if selected is None:
                logger.debug(f"Rejected chapter selection {raw!r}")
                self.terminal.print("[red]Invalid chapter in selection. Please choose again.[/red]\n")
                continue
            return selected

    def select_pool_size(self, pool: list[QuizItem]) -> list[QuizItem]:
        """Ask how many questions to practice and sample the pool."""
        token = self.settings.select_all_token
        self.terminal.print(
            f"Enter the number of questions to practice "
            f"({len(pool)} available, '{token}' for all):"
        )
        raw = self.terminal.ask(get_quiz_prompt("count"))
        count = parse_question_count(raw, token, self.settings.default_question_count)
        return sample_pool(pool, count, self.rng)

    def build(self) -> list[QuizItem]:
        selected = self.select_chapters()
        pool = build_pool(self.bank, selected)
        return self.select_pool_size(pool)
