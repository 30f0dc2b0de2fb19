"""Unit tests for search error types.

Each test has exactly one assertion.
"""

from laddr.core import (
    CorpusLoadError,
    NoPathExistsError,
    NotInDictionaryError,
    SearchError,
    WordsUnequalLenError,
)


class TestWordsUnequalLenError:
    """Test the unequal-length failure."""

    def test_is_search_error(self) -> None:
        """Unequal lengths are reported as a search error."""
        assert isinstance(WordsUnequalLenError("cat", "fish"), SearchError)

    def test_carries_end_word(self) -> None:
        """The offending end word is kept on the exception."""
        assert WordsUnequalLenError("cat", "fish").end_word == "fish"

    def test_message_names_both_words(self) -> None:
        """The message quotes both input words."""
        assert str(WordsUnequalLenError("cat", "fish")) == (
            "The start word 'cat' is not the same length as the end word 'fish'."
        )


class TestNotInDictionaryError:
    """Test the missing-word failure."""

    def test_carries_word(self) -> None:
        """The missing word is kept on the exception."""
        assert NotInDictionaryError("bwq").word == "bwq"

    def test_message_names_word(self) -> None:
        """The message quotes the missing word."""
        assert str(NotInDictionaryError("bwq")) == "The word 'bwq' is not in the dictionary."


class TestNoPathExistsError:
    """Test the disconnected-words failure."""

    def test_carries_start_word(self) -> None:
        """The start word is kept on the exception."""
        assert NoPathExistsError("distance", "keyboard").start_word == "distance"

    def test_message_names_both_words(self) -> None:
        """The message quotes both words."""
        assert str(NoPathExistsError("distance", "keyboard")) == (
            "No path from 'distance' to 'keyboard' exists."
        )


class TestCorpusLoadError:
    """Test the corpus library failure."""

    def test_is_runtime_error(self) -> None:
        """Corpus library failures are runtime errors, not search errors."""
        assert issubclass(CorpusLoadError, RuntimeError)
