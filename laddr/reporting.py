"""Rendering of search results for the command line."""

import sys
from typing import TextIO

from loguru import logger

from laddr.core import SearchError, SearchResult
from laddr.utils import Constants


def format_path(path: list[str]) -> str:
    """Render a ladder as 'cat -> cot -> cog -> dog'."""
    return Constants.PATH_SEPARATOR.join(path)


def report_path(result: SearchResult, stream: TextIO | None = None) -> None:
    """Print a found ladder and its step count."""
    stream = stream or sys.stdout
    steps = result.steps
    print(f"The shortest path is {format_path(result.path)}", file=stream)
    print(f"({steps} step{'' if steps == 1 else 's'})", file=stream)


def report_error(error: SearchError) -> None:
    """Log a search failure."""
    logger.error(f"An error occurred: {error}")
