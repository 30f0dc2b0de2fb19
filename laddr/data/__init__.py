"""Data loading and management for Laddr."""

from laddr.data.corpus import Corpus
from laddr.data.dictionary import (
    default_corpus,
    load_corpus,
    load_dictionary,
    load_exclusions,
    load_word_list,
)

__all__ = [
    "Corpus",
    "default_corpus",
    "load_corpus",
    "load_dictionary",
    "load_exclusions",
    "load_word_list",
]
