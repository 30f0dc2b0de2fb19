"""Command-line interface for Laddr."""

from laddr.cli.parser import create_parser

__all__ = ["create_parser"]
