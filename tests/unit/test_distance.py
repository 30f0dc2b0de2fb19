"""Unit tests for character distance.

Each test has exactly one assertion.
"""

from laddr.core import hamming_distance, is_one_step


class TestHammingDistance:
    """Test substitution distance between equal-length words."""

    def test_identical_words_have_zero_distance(self) -> None:
        """A word is zero substitutions away from itself."""
        assert hamming_distance("cat", "cat") == 0

    def test_single_substitution_counts_one(self) -> None:
        """Words differing in one position have distance one."""
        assert hamming_distance("cat", "cot") == 1

    def test_counts_every_differing_position(self) -> None:
        """Words differing everywhere have distance equal to their length."""
        assert hamming_distance("cat", "dog") == 3

    def test_is_symmetric(self) -> None:
        """Distance does not depend on argument order."""
        assert hamming_distance("cold", "cord") == hamming_distance("cord", "cold")

    def test_is_case_sensitive(self) -> None:
        """Upper and lower case characters are different characters."""
        assert hamming_distance("Cat", "cat") == 1

    def test_compares_non_ascii_characters(self) -> None:
        """Distance is measured in characters, not bytes."""
        assert hamming_distance("café", "cafe") == 1

    def test_empty_words_have_zero_distance(self) -> None:
        """Two empty words are identical."""
        assert hamming_distance("", "") == 0


class TestIsOneStep:
    """Test the ladder adjacency predicate."""

    def test_one_substitution_is_one_step(self) -> None:
        """Words one substitution apart are adjacent."""
        assert is_one_step("cog", "dog") is True

    def test_identical_words_are_not_one_step(self) -> None:
        """A word is not its own neighbour."""
        assert is_one_step("dog", "dog") is False

    def test_two_substitutions_are_not_one_step(self) -> None:
        """Words two substitutions apart are not adjacent."""
        assert is_one_step("cat", "cog") is False
