"""Main entry point for laddr package."""

import sys

from loguru import logger

from laddr.cli import create_parser
from laddr.core import SearchError, load_config
from laddr.data import load_corpus
from laddr.reporting import report_error, report_path
from laddr.search import LadderSearch
from laddr.utils import setup_logger


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug, log_file=config.log_file)

    if config.verbose:
        logger.info("Configuration:")
        if config.corpus:
            logger.info(f"  Corpus file: {config.corpus}")
        elif config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        else:
            logger.info("  Corpus: english-words (web2, gcide)")
        if config.include:
            logger.info(f"  Include file: {config.include}")
        if config.exclude:
            logger.info(f"  Exclude file: {config.exclude}")
        logger.info(f"  Ignore case: {config.ignore_case}")
        logger.info("")

    try:
        corpus = load_corpus(config)
        search = LadderSearch(corpus, show_progress=config.verbose)
        result = search.run(args.start_word, args.end_word)
    except SearchError as e:
        report_error(e)
        return 1
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Search interrupted by user")
        raise

    report_path(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
