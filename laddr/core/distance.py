"""Character distance between words."""


def hamming_distance(word1: str, word2: str) -> int:
    """Count the positions at which two equal-length words differ.

    Callers must pass words of equal length. Characters are compared pairwise,
    so any trailing characters of a longer word are not counted.

    e.g., ('cat', 'cot') -> 1, ('cat', 'dog') -> 3
    """
    return sum(1 for c1, c2 in zip(word1, word2) if c1 != c2)


def is_one_step(word1: str, word2: str) -> bool:
    """Check whether two words are exactly one substitution apart."""
    return hamming_distance(word1, word2) == 1
