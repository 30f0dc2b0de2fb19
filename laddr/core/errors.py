"""Exceptions raised by Laddr."""


class SearchError(Exception):
    """Base class for failures reported by the ladder search."""


class WordsUnequalLenError(SearchError):
    """The start and end words have different lengths."""

    def __init__(self, start_word: str, end_word: str):
        self.start_word = start_word
        self.end_word = end_word
        super().__init__(
            f"The start word '{start_word}' is not the same length as the end word '{end_word}'."
        )


class NotInDictionaryError(SearchError):
    """An input word is absent from the dictionary for its length."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"The word '{word}' is not in the dictionary.")


class NoPathExistsError(SearchError):
    """Both words are in the dictionary but no ladder connects them."""

    def __init__(self, start_word: str, end_word: str):
        self.start_word = start_word
        self.end_word = end_word
        super().__init__(f"No path from '{start_word}' to '{end_word}' exists.")


class CorpusLoadError(RuntimeError):
    """A word corpus could not be loaded from its source library."""
