"""Word pattern matching for Laddr."""

from laddr.matching.pattern_matcher import PatternMatcher

__all__ = ["PatternMatcher"]
