"""
Content: Question bank loading and validation.

Core modules:
- bank_loader: YAML question bank parsing into typed chapters
"""

from .bank_loader import (
    BUNDLED_BANK_PATH,
    Chapter,
    QuestionBank,
    QuestionBankError,
    load_question_bank,
    parse_question_bank,
)

__all__ = [
    "BUNDLED_BANK_PATH",
    "Chapter",
    "QuestionBank",
    "QuestionBankError",
    "load_question_bank",
    "parse_question_bank",
]
