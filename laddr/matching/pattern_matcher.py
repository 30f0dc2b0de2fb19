"""Exact and wildcard word pattern matching.

Patterns containing '*' are wildcards (e.g., '*ing', 'qu*', '*zz*'); all other
patterns match a word exactly. Used to drop words from a corpus.
"""

from collections.abc import Iterable
from re import Pattern

from laddr.utils import Constants, compile_wildcard_regex


class PatternMatcher:
    """Matcher for exact strings and wildcard patterns.

    Wildcard patterns are compiled once; exact patterns are kept in a set.
    """

    def __init__(self, patterns: Iterable[str]):
        self.exact_patterns: set[str] = set()
        self.wildcard_regexes: list[Pattern] = []

        for pattern in patterns:
            if Constants.WILDCARD in pattern:
                self.wildcard_regexes.append(compile_wildcard_regex(pattern))
            else:
                self.exact_patterns.add(pattern)

    def __bool__(self) -> bool:
        return bool(self.exact_patterns or self.wildcard_regexes)

    def matches(self, text: str) -> bool:
        """Check if text matches any pattern (exact or wildcard)."""
        if text in self.exact_patterns:
            return True
        return any(regex.match(text) for regex in self.wildcard_regexes)

    def filter_words(self, words: Iterable[str]) -> list[str]:
        """Return the words that do NOT match any pattern, in their original order."""
        return [word for word in words if not self.matches(word)]
