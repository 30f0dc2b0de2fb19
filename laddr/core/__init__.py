"""Core domain logic for Laddr."""

from .config import Config, load_config
from .distance import hamming_distance, is_one_step
from .errors import (
    CorpusLoadError,
    NoPathExistsError,
    NotInDictionaryError,
    SearchError,
    WordsUnequalLenError,
)
from .types import SearchNode, SearchResult, Word

__all__ = [
    "Config",
    "CorpusLoadError",
    "NoPathExistsError",
    "NotInDictionaryError",
    "SearchError",
    "SearchNode",
    "SearchResult",
    "Word",
    "WordsUnequalLenError",
    "hamming_distance",
    "is_one_step",
    "load_config",
]
