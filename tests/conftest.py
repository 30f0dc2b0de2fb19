"""Shared fixtures for Laddr tests."""

import pytest
from loguru import logger

from laddr.data import Corpus

SMALL_WORDS = "cat cot cog dog bat bad distance keyboard fish"


@pytest.fixture
def small_corpus() -> Corpus:
    """Corpus holding the words of the documented cat -> dog scenarios."""
    return Corpus.from_text(SMALL_WORDS)


@pytest.fixture
def folding_corpus() -> Corpus:
    """The same words in a corpus that matches input case-insensitively."""
    return Corpus.from_text(SMALL_WORDS, ignore_case=True)


@pytest.fixture
def corpus_file(tmp_path):
    """Corpus file holding the same words as ``small_corpus``."""
    path = tmp_path / "words.txt"
    path.write_text(SMALL_WORDS.replace(" ", "\n") + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop log handlers a test installed so none outlive its captured streams."""
    yield
    logger.remove()
