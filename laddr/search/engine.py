"""Breadth-first word ladder search.

The working dictionary doubles as the unvisited set: a word is removed the
moment its node is expanded, so no word is expanded twice and the search
always terminates. Neighbours are discovered on demand by scanning the
remaining dictionary for words one substitution away; no adjacency graph is
built up front.
"""

from collections import deque
import time

from loguru import logger
from tqdm import tqdm

from laddr.core import (
    NoPathExistsError,
    NotInDictionaryError,
    SearchNode,
    SearchResult,
    WordsUnequalLenError,
    is_one_step,
)
from laddr.data import Corpus, default_corpus


class LadderSearch:
    """Finds one shortest word ladder between two words of a corpus."""

    def __init__(self, corpus: Corpus, show_progress: bool = False):
        self.corpus = corpus
        self.show_progress = show_progress

    def _validate(self, start_word: str, end_word: str) -> tuple[dict[str, None], str, str]:
        """Check the input pair as given by the caller.

        Returns the working dictionary for the words' length and the dictionary
        keys of both words (case-folded only when the corpus ignores case).
        """
        if len(start_word) != len(end_word):
            raise WordsUnequalLenError(start_word, end_word)

        dictionary = self.corpus.words_of_length(len(start_word))

        start_key = self.corpus.fold(start_word)
        if start_key not in dictionary:
            raise NotInDictionaryError(start_word)
        end_key = self.corpus.fold(end_word)
        if end_key not in dictionary:
            raise NotInDictionaryError(end_word)

        return dictionary, start_key, end_key

    def run(self, start_word: str, end_word: str) -> SearchResult:
        """Search for a shortest ladder from ``start_word`` to ``end_word``.

        Raises:
            WordsUnequalLenError: The words differ in length
            NotInDictionaryError: Either word is missing (start is checked first)
            NoPathExistsError: The dictionary holds no ladder between them
        """
        start_time = time.time()
        dictionary, start_key, end_key = self._validate(start_word, end_word)

        logger.info(f"Finding the shortest path from '{start_word}' to '{end_word}'...")

        if start_key == end_key:
            return SearchResult(path=[start_key], elapsed_time=time.time() - start_time)

        frontier: deque[SearchNode] = deque([SearchNode(start_key)])
        words_expanded = 0
        depth = -1

        pbar = tqdm(
            total=len(dictionary),
            desc="Expanding words",
            unit="word",
            leave=False,
            disable=not self.show_progress,
        )
        try:
            while frontier:
                current = frontier.popleft()
                # A word can sit in the frontier more than once; only the first copy expands
                if current.word not in dictionary:
                    continue
                if current.depth != depth:
                    depth = current.depth
                    logger.debug(
                        f"  Level {depth}: {len(frontier) + 1} words in frontier, "
                        f"{len(dictionary)} unvisited"
                    )

                # Mark visited before scanning so a word is never its own neighbour
                del dictionary[current.word]
                words_expanded += 1
                pbar.update(1)

                neighbours = [word for word in dictionary if is_one_step(current.word, word)]
                for word in neighbours:
                    child = current.child(word)
                    if word == end_key:
                        path = child.path()
                        elapsed = time.time() - start_time
                        logger.info(
                            f"  Found a {len(path) - 1}-step ladder after expanding "
                            f"{words_expanded} words in {elapsed:.3f}s"
                        )
                        return SearchResult(
                            path=path, words_expanded=words_expanded, elapsed_time=elapsed
                        )
                    frontier.append(child)
        finally:
            pbar.close()

        logger.info(f"  Exhausted {words_expanded} reachable words without reaching '{end_word}'")
        raise NoPathExistsError(start_word, end_word)


def find_shortest_path(start_word: str, end_word: str, corpus: Corpus | None = None) -> list[str]:
    """Return one shortest ladder from ``start_word`` to ``end_word``, both inclusive.

    Uses the process-wide english-words corpus when ``corpus`` is not given.
    Raises a ``SearchError`` subclass when no ladder can be produced.
    """
    if corpus is None:
        corpus = default_corpus()
    return LadderSearch(corpus).run(start_word, end_word).path
