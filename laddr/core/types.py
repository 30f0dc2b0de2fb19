"""Type definitions for Laddr."""

from dataclasses import dataclass, field

# A word is a plain string; length and distance are measured in characters
Word = str


@dataclass(frozen=True)
class SearchNode:
    """A word discovered during the search, linked to the node it came from.

    The root node has no parent. Parent chains never form cycles because a word
    leaves the working dictionary as soon as its node is expanded.
    """

    word: Word
    parent: "SearchNode | None" = None
    depth: int = 0

    def child(self, word: Word) -> "SearchNode":
        """Create a node for a neighbour of this node's word."""
        return SearchNode(word=word, parent=self, depth=self.depth + 1)

    def path(self) -> list[Word]:
        """Walk the parent chain back to the root and return it root first."""
        words = []
        node: SearchNode | None = self
        while node is not None:
            words.append(node.word)
            node = node.parent
        words.reverse()
        return words


@dataclass
class SearchResult:
    """Outcome of a successful ladder search."""

    path: list[Word] = field(default_factory=list)
    words_expanded: int = 0
    elapsed_time: float = 0.0

    @property
    def steps(self) -> int:
        """Number of single-character substitutions on the path."""
        return max(len(self.path) - 1, 0)
