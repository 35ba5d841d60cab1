"""
Unit tests for quiz rendering helpers and the terminal.
"""

import io

from rich.console import Console

from src.delivery.quiz_visuals import (
    QuizTerminal,
    chapter_table,
    get_quiz_prompt,
    quiz_error_panel,
    quiz_progress_text,
    quiz_result_text,
    quiz_summary_text,
)


def render(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, force_terminal=False, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestRenderables:
    def test_result_correct(self):
        text = quiz_result_text(True, "ARP")

        assert text.plain.startswith("Correct!")
        assert "ARP" not in text.plain

    def test_result_incorrect_shows_answer(self):
        assert quiz_result_text(False, "ARP").plain.startswith("Incorrect! The answer is ARP")

    def test_result_styles_differ(self):
        correct = quiz_result_text(True, "x")
        incorrect = quiz_result_text(False, "x")

        assert correct.spans[0].style != incorrect.spans[0].style

    def test_progress(self):
        assert quiz_progress_text(4, 2, 10).plain == "Chapter 4 (2/10)"

    def test_summary(self):
        assert quiz_summary_text(3, 5).plain == "You answered 3 of 5 questions correctly!"

    def test_chapter_table(self):
        output = render(chapter_table([(1, {"MATCHING": 3}), (2, {"MATCHING": 0, "SPELLING": 1})]))

        assert "Chapter" in output
        assert "MATCHING" in output
        assert "SPELLING" in output

    def test_error_panel(self):
        assert "bank is broken" in render(quiz_error_panel("bank is broken"))

    def test_prompt_lookup(self):
        assert "Selected chapters" in get_quiz_prompt("chapters")
        assert get_quiz_prompt("unknown") == get_quiz_prompt("default")
        assert get_quiz_prompt("multiple_choice", "(a-d)").endswith("(a-d)")


class TestQuizTerminal:
    def test_reads_trimmed_lines(self):
        console = Console(file=io.StringIO(), force_terminal=False, color_system=None)
        terminal = QuizTerminal(console=console, stream=io.StringIO("  first  \nsecond\n"))

        assert terminal.ask("Prompt") == "first"
        assert terminal.ask() == "second"
        assert "Prompt" in console.file.getvalue()

    def test_exhausted_stream_reads_empty(self):
        console = Console(file=io.StringIO(), force_terminal=False, color_system=None)
        terminal = QuizTerminal(console=console, stream=io.StringIO(""))

        assert terminal.ask() == ""

    def test_end_of_input_reads_empty(self, monkeypatch):
        """A closed stdin ends reads with an empty answer instead of raising."""

        def closed_stdin(*args, **kwargs):
            raise EOFError

        monkeypatch.setattr("src.delivery.quiz_visuals.Prompt.ask", closed_stdin)
        console = Console(file=io.StringIO(), force_terminal=False, color_system=None)
        terminal = QuizTerminal(console=console)

        assert terminal.ask("Prompt") == ""
        assert terminal.ask() == ""
