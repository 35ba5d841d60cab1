"""
QuizDeck: chapter-based terminal quiz trainer.

Components:
- questions: Question kinds with a shared present-and-grade flow
- session: Chapter selection, pool assembly and sampling
- runner: Question loop, scoring and final tally
"""
