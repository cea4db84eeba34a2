"""Transition graph: eligible words indexed by their first and last letters."""

from collections.abc import Iterator, Sequence
from typing import NamedTuple, TypeAlias

from bitarray import frozenbitarray
from sortedcontainers import SortedDict

from letterboxed.board import Board

Edges: TypeAlias = SortedDict
"""Mapping of start letter -> end letter -> (mapping of word -> first word index)."""


class TransitionGraph(NamedTuple):
    """Eligible words for one board, keyed by `(first letter, last letter)`.

    Both letter levels of `edges` iterate in sorted letter order and the words under each
    letter pair iterate in sorted word order, so walking the graph always visits words in
    the same order.  A word listed more than once is kept once, at its first index.
    """

    edges: Edges
    """Start letter -> end letter -> eligible words bridging the two, with their indices."""

    coverage: dict[int, frozenbitarray]
    """Word index -> coverage mask of the word on the board."""

    @property
    def size(self) -> int:
        """Number of eligible words in the graph."""
        return len(self.coverage)

    def start_letters(self) -> list[str]:
        """Letters that begin at least one eligible word, in sorted order."""
        return list(self.edges.keys())

    def outgoing(self, letter: str) -> Iterator[tuple[str, int]]:
        """Yield `(end_letter, word_index)` for every eligible word starting with `letter`."""
        by_end = self.edges.get(letter)
        if by_end is None:
            return
        for end_letter, by_word in by_end.items():
            for idx in by_word.values():
                yield end_letter, idx


def build_transition_graph(
    board: Board,
    words: Sequence[str],
    *,
    min_length: int = 3,
) -> TransitionGraph:
    """Build the transition graph of the words that are playable on `board`.

    Args:
        board (Board): The puzzle board.
        words (Sequence[str]): Candidate words.  Indices into this sequence identify words.
        min_length (int): Shortest word the puzzle accepts.

    Returns:
        A TransitionGraph over the eligible words.
    """
    edges: Edges = SortedDict()
    coverage: dict[int, frozenbitarray] = {}

    for idx, word in enumerate(words):
        if not board.is_eligible(word, min_length=min_length):
            continue
        by_end = edges.setdefault(word[0], SortedDict())
        by_word = by_end.setdefault(word[-1], SortedDict())
        if word in by_word:
            continue
        by_word[word] = idx
        coverage[idx] = board.coverage_mask(word)

    return TransitionGraph(edges=edges, coverage=coverage)
