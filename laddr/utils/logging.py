"""Logging configuration for Laddr using loguru.

Search progress goes to stderr so that stdout carries only the ladder. A
run can also mirror its log to a file; the file sink shares the console
level but never carries colour markup.
"""

from pathlib import Path
import sys

from loguru import logger

# Debug runs show where each message came from; plain runs show the message only
DEBUG_LOCATION = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - "
CONSOLE_FORMATS = {
    "DEBUG": (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    ),
    "INFO": "<level>{message}</level>",
    "WARNING": "<level>{message}</level>",
}
FILE_FORMATS = {
    "DEBUG": DEBUG_LOCATION + "{message}",
    "INFO": "{message}",
    "WARNING": "{level}: {message}",
}


def log_level(verbose: bool = False, debug: bool = False) -> str:
    """Map the verbosity flags to a loguru level name; debug wins over verbose."""
    if debug:
        return "DEBUG"
    return "INFO" if verbose else "WARNING"


def setup_logger(
    verbose: bool = False, debug: bool = False, log_file: str | Path | None = None
) -> list[int]:
    """Replace every loguru sink with the ones a search run needs.

    Args:
        verbose: Show INFO messages (search start and summary)
        debug: Show DEBUG messages (per-level frontier sizes)
        log_file: Optional file that receives the same messages

    Returns:
        The loguru handler ids added, stderr first
    """
    logger.remove()
    level = log_level(verbose, debug)
    handler_ids = [
        logger.add(sys.stderr, format=CONSOLE_FORMATS[level], level=level, colorize=True)
    ]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMATS[level],
                level=level,
                colorize=False,
                encoding="utf-8",
            )
        )

    return handler_ids
