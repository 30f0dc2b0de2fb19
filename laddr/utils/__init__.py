"""Utility functions for Laddr."""

from laddr.utils.constants import Constants
from laddr.utils.helpers import compile_wildcard_regex, expand_file_path
from laddr.utils.logging import log_level, setup_logger

__all__ = [
    "Constants",
    "compile_wildcard_regex",
    "expand_file_path",
    "log_level",
    "setup_logger",
]
