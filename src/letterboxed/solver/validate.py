"""Checks for word chains played on a board."""

from collections.abc import Sequence
from itertools import pairwise

from letterboxed.board import Board


def validate(board: Board, chain: Sequence[str]) -> bool:
    """Return whether `chain` is a legal sequence of plays on `board`.

    Each word must start with the last letter of the word before it, and no word may step
    between two letters on the same side.  Coverage is not checked: a legal chain need not
    use every letter.
    """
    for earlier, later in pairwise(chain):
        if earlier[-1:] != later[:1]:
            return False
    return not any(board.has_forbidden_pair(word) for word in chain)


def covered_letters(board: Board, chain: Sequence[str]) -> frozenset[str]:
    """Return the board letters used anywhere in `chain`."""
    return frozenset(ch for word in chain for ch in word if ch in board.letters)
