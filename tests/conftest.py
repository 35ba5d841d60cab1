"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import Settings
from src.content.bank_loader import parse_question_bank
from src.delivery.quiz_visuals import QuizTerminal


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


SAMPLE_BANK_YAML = """
chapters:
  - chapter: 1
    multiple_choice:
      - question: "Which planet is closest to the Sun?"
        options: ["Venus", "Mercury", "Mars", "Earth"]
        answer: b
      - question: "Which gas do plants absorb?"
        options: ["Oxygen", "Nitrogen", "Carbon dioxide", "Helium"]
        answer: c
    fill_in_the_blanks:
      - question: "Water freezes at ____ degrees Celsius."
        answer: 0
    spelling:
      - question: "Choose the correct spelling."
        options: ["recieve", "receeve", "receve"]
        answer: "receive"
  - chapter: 2
    matching:
      - question: "Match each term with its definition."
        pairs:
          - term: "Atom"
            definition: "Smallest unit of an element"
          - term: "Molecule"
            definition: "Two or more bonded atoms"
          - term: "Ion"
            definition: "Charged atom"
"""


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_bank_yaml():
    """Provide the text of a small two-chapter question bank."""
    return SAMPLE_BANK_YAML


@pytest.fixture
def sample_bank():
    """Provide the parsed two-chapter question bank."""
    return parse_question_bank(SAMPLE_BANK_YAML)


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return Settings(_env_file=None, select_all_token="a", default_question_count=5)


@pytest.fixture
def make_terminal():
    """Build a terminal that reads the given lines and records its output."""

    def _make(*lines: str) -> QuizTerminal:
        console = Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        return QuizTerminal(console=console, stream=stream)

    return _make


@pytest.fixture
def read_output():
    """Everything written to a terminal built by make_terminal."""

    def _read(terminal: QuizTerminal) -> str:
        return terminal.console.file.getvalue()

    return _read
