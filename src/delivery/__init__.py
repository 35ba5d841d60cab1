"""
Delivery: terminal rendering and input for quiz sessions.

Components:
- quiz_visuals: Theme, prompts, result/progress renderables, QuizTerminal
"""

from .quiz_visuals import QuizTerminal

__all__ = [
    "QuizTerminal",
]
