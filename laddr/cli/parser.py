"""Command-line interface for the Laddr project."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="laddr",
        description=(
            "Find the shortest path, changing one character at a time, "
            "between two words of equal length."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search the english-words dictionary
  %(prog)s cat dog

  # Search your own whitespace-separated word list
  %(prog)s --corpus words.txt cold warm -v

  # Restrict the search to the 20000 most common English words
  %(prog)s --top-n 20000 head tail

  # Using JSON config
  %(prog)s --config config.json name norm

Example config.json:
{
  "corpus": "words.txt",
  "include": "settings/include.txt",
  "exclude": "settings/exclude.txt",
  "ignore_case": true,
  "verbose": true,
  "log_file": "logs/laddr.log"
}
        """,
    )

    # Words
    parser.add_argument("start_word", metavar="START_WORD", help="The starting word.")
    parser.add_argument("end_word", metavar="END_WORD", help="The ending word.")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word sources
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--corpus", type=str, help="File of whitespace-separated words to search"
    )
    source.add_argument(
        "--top-n", type=int, help="Search the top N most common English words (wordfreq)"
    )
    parser.add_argument("--include", type=str, help="File with additional words to include")
    parser.add_argument(
        "--exclude", type=str, help="File with words or wildcard patterns to exclude"
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Lowercase corpus words and match the input words case-insensitively",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser
