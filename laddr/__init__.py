"""Laddr - shortest word ladder finder.

Find the shortest chain of single-character substitutions between two
equal-length words, where every word on the chain is in a dictionary.
"""

from laddr.core import (
    Config,
    NoPathExistsError,
    NotInDictionaryError,
    SearchError,
    WordsUnequalLenError,
    hamming_distance,
    load_config,
)
from laddr.data import Corpus, load_corpus, load_dictionary
from laddr.search import LadderSearch, find_shortest_path
from laddr.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Corpus",
    "LadderSearch",
    "NoPathExistsError",
    "NotInDictionaryError",
    "SearchError",
    "WordsUnequalLenError",
    "find_shortest_path",
    "hamming_distance",
    "load_config",
    "load_corpus",
    "load_dictionary",
    "setup_logger",
]
