"""Word ladder search for Laddr."""

from laddr.search.engine import LadderSearch, find_shortest_path

__all__ = ["LadderSearch", "find_shortest_path"]
