"""Unit tests for result rendering.

Each test has exactly one assertion.
"""

import io

from loguru import logger

from laddr.core import NotInDictionaryError, SearchResult
from laddr.reporting import format_path, report_error, report_path


class TestFormatPath:
    """Test ladder rendering."""

    def test_joins_words_with_arrows(self) -> None:
        """Words are separated by arrows."""
        assert format_path(["cat", "cot", "cog", "dog"]) == "cat -> cot -> cog -> dog"

    def test_single_word_has_no_arrow(self) -> None:
        """A one-word ladder renders as the word."""
        assert format_path(["cat"]) == "cat"


class TestReportPath:
    """Test printing a found ladder."""

    def test_prints_path(self) -> None:
        """The rendered ladder is printed."""
        stream = io.StringIO()
        report_path(SearchResult(path=["cat", "cot"]), stream)
        assert "The shortest path is cat -> cot" in stream.getvalue()

    def test_prints_plural_step_count(self) -> None:
        """Multi-step ladders report their step count."""
        stream = io.StringIO()
        report_path(SearchResult(path=["cat", "cot", "cog", "dog"]), stream)
        assert "(3 steps)" in stream.getvalue()

    def test_prints_singular_step_count(self) -> None:
        """A one-step ladder uses the singular."""
        stream = io.StringIO()
        report_path(SearchResult(path=["cat", "cot"]), stream)
        assert "(1 step)" in stream.getvalue()

    def test_single_word_ladder_has_zero_steps(self) -> None:
        """A start word equal to the end word reports no steps."""
        stream = io.StringIO()
        report_path(SearchResult(path=["cat"]), stream)
        assert "(0 steps)" in stream.getvalue()

    def test_defaults_to_stdout(self, capsys) -> None:
        """Without a stream the ladder goes to standard output."""
        report_path(SearchResult(path=["cat"]))
        assert "The shortest path is cat" in capsys.readouterr().out


class TestReportError:
    """Test logging a search failure."""

    def test_logs_error_message(self) -> None:
        """The failure message is logged at ERROR level."""
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="ERROR", format="{message}")
        try:
            report_error(NotInDictionaryError("bwq"))
        finally:
            logger.remove(handler_id)
        assert messages[0].strip() == (
            "An error occurred: The word 'bwq' is not in the dictionary."
        )
