"""Corpus and dictionary loading."""

import functools

from loguru import logger

from laddr.core import Config
from laddr.data.corpus import Corpus
from laddr.matching import PatternMatcher
from laddr.utils import Constants, expand_file_path


def _read_lines(filepath: str, description: str) -> list[str]:
    """Read non-empty, non-comment lines from a UTF-8 file."""
    lines = []
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith(Constants.COMMENT_PREFIX):
                    lines.append(line)
    except FileNotFoundError:
        logger.error(f"✗ {description} file not found: {filepath}")
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
    return lines


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load extra corpus words from file, one or more per line."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    words = [word for line in _read_lines(filepath, "Word list") for word in line.split()]

    if verbose:
        logger.info(f"  Loaded {len(words)} words from {filepath}")

    return words


def load_exclusions(filepath: str | None, verbose: bool = False) -> set[str]:
    """Load exclusion patterns from file."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return set()

    exclusions = set(_read_lines(filepath, "Exclusions"))

    if verbose:
        logger.info(f"  Loaded {len(exclusions)} exclusion patterns")

    return exclusions


def load_corpus(config: Config) -> Corpus:
    """Build the corpus described by the configuration.

    The word source is the corpus file if given, else wordfreq's top N words,
    else the english-words package. Include-file words are then added and
    exclude-file patterns removed.
    """
    verbose = config.verbose

    if config.corpus:
        if verbose:
            logger.info(f"  Loading corpus from {config.corpus}...")
        corpus = Corpus.from_file(config.corpus, ignore_case=config.ignore_case)
    elif config.top_n:
        if verbose:
            logger.info(f"  Loading top {config.top_n} words from wordfreq...")
        corpus = Corpus.from_wordfreq(config.top_n, ignore_case=config.ignore_case)
    else:
        if verbose:
            logger.info("  Loading English words dictionary...")
        corpus = Corpus.from_english_words(ignore_case=config.ignore_case)

    original_word_count = len(corpus)

    custom_words = load_word_list(config.include, verbose)
    if custom_words:
        corpus = corpus.with_words(custom_words)
    added_count = len(corpus) - original_word_count

    matcher = PatternMatcher(load_exclusions(config.exclude, verbose))
    removed_count = 0
    if matcher:
        before = len(corpus)
        corpus = corpus.without(matcher)
        removed_count = before - len(corpus)

    if verbose:
        logger.info(f"  Loaded {len(corpus)} words")
        if added_count > 0:
            logger.info(f"  Added {added_count} custom words from include file")
        if removed_count > 0:
            logger.info(
                f"  Removed {removed_count} words based on exclude file (including wildcards)"
            )

    return corpus


@functools.lru_cache(maxsize=None)
def default_corpus() -> Corpus:
    """Return the english-words corpus, loaded on first use and kept for the process lifetime."""
    return Corpus.from_english_words()


def load_dictionary(word_len: int, corpus: Corpus | None = None) -> dict[str, None]:
    """Return the lexicographically ordered set of corpus words of length ``word_len``."""
    if corpus is None:
        corpus = default_corpus()
    return corpus.words_of_length(word_len)
