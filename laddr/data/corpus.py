"""Read-only word corpus and per-length dictionary filtering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from wordfreq import top_n_list

from laddr.core import CorpusLoadError
from laddr.matching import PatternMatcher
from laddr.utils import Constants, expand_file_path


class Corpus:
    """The full word list a search draws its dictionaries from.

    Tokens are stripped, case-folded when ``ignore_case`` is set, deduplicated
    and sorted once at construction. The corpus is never mutated afterwards,
    so one instance can back any number of searches.
    """

    def __init__(self, words: Iterable[str], ignore_case: bool = False):
        self.ignore_case = ignore_case
        tokens = (self.fold(word.strip()) for word in words)
        self._words: tuple[str, ...] = tuple(sorted({token for token in tokens if token}))
        self._lookup = frozenset(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.fold(word) in self._lookup

    def __repr__(self) -> str:
        return f"Corpus({len(self._words)} words, ignore_case={self.ignore_case})"

    def fold(self, word: str) -> str:
        """Lowercase a word when the corpus ignores case; otherwise return it unchanged."""
        return word.lower() if self.ignore_case else word

    def words_of_length(self, word_len: int) -> dict[str, None]:
        """Return every corpus word of exactly ``word_len`` characters.

        The result is a fresh insertion-ordered dict used as an ordered set:
        it supports membership tests and removal, and iterates in
        lexicographic order. Callers own it and may mutate it freely.
        """
        return dict.fromkeys(word for word in self._words if len(word) == word_len)

    def with_words(self, words: Iterable[str]) -> Corpus:
        """Return a new corpus with additional words."""
        return Corpus([*self._words, *words], ignore_case=self.ignore_case)

    def without(self, matcher: PatternMatcher) -> Corpus:
        """Return a new corpus without the words matching any exclusion pattern."""
        return Corpus(matcher.filter_words(self._words), ignore_case=self.ignore_case)

    @classmethod
    def from_text(cls, text: str, ignore_case: bool = False) -> Corpus:
        """Build a corpus from whitespace-separated tokens."""
        return cls(text.split(), ignore_case=ignore_case)

    @classmethod
    def from_file(cls, filepath: str, ignore_case: bool = False) -> Corpus:
        """Build a corpus from a UTF-8 file of whitespace-separated tokens.

        Lines starting with '#' are comments.
        """
        filepath = expand_file_path(filepath) or filepath
        tokens: list[str] = []
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                for line in f:
                    if line.lstrip().startswith(Constants.COMMENT_PREFIX):
                        continue
                    tokens.extend(line.split())
        except FileNotFoundError:
            logger.error(f"✗ Corpus file not found: {filepath}")
            logger.error("  Please check the file path and try again")
            raise
        except PermissionError:
            logger.error(f"✗ Permission denied reading file: {filepath}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading {filepath}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

        corpus = cls(tokens, ignore_case=ignore_case)
        logger.debug(f"Read {len(tokens)} tokens ({len(corpus)} unique words) from {filepath}")
        return corpus

    @classmethod
    def from_english_words(
        cls,
        sources: Iterable[str] = Constants.ENGLISH_WORDS_SOURCES,
        ignore_case: bool = False,
    ) -> Corpus:
        """Build a corpus from the english-words package."""
        try:
            words: set[str] = get_english_words_set(list(sources), lower=ignore_case)
        except Exception as e:
            logger.error(f"✗ Failed to load English words dictionary: {e}")
            logger.error("  This may indicate a problem with the 'english-words' package")
            logger.error("  Try reinstalling: pip install english-words")
            raise CorpusLoadError("Failed to load english-words corpus") from e
        return cls(words, ignore_case=ignore_case)

    @classmethod
    def from_wordfreq(cls, top_n: int, ignore_case: bool = False) -> Corpus:
        """Build a corpus from the ``top_n`` most frequent English words in wordfreq."""
        try:
            words = top_n_list(Constants.WORDFREQ_LANG, top_n)
        except Exception as e:
            logger.error(f"✗ Failed to load words from wordfreq: {e}")
            logger.error("  This may indicate a problem with the 'wordfreq' package")
            raise CorpusLoadError("Failed to load wordfreq corpus") from e
        return cls(words, ignore_case=ignore_case)
