"""Classes and functions for representing the Letter Boxed board."""

from collections.abc import Iterable
from itertools import pairwise, product

from bitarray import frozenbitarray
from bitarray.util import zeros


class Board:
    """A Letter Boxed board: letters arranged along the sides of a square.

    Consecutive letters within a word must sit on different sides of the square, so every
    ordered pair of letters drawn from a single side (a letter paired with itself included)
    is forbidden.  The board is fully determined by its sides and never changes after
    construction.

    For example, the board

          E L Z
        I       C
        V       T
        A       H
          R Y U

    is solved by "VEHICULAR" followed by "RITZILY".
    """

    def __init__(self, sides: Iterable[str]) -> None:
        self.sides: tuple[str, ...] = tuple(sides)
        """The raw side strings, in the order given."""

        forbidden: set[tuple[str, str]] = set()
        for side in self.sides:
            forbidden.update(product(side, repeat=2))
        self.forbidden_adjacent: frozenset[tuple[str, str]] = frozenset(forbidden)
        """Letter pairs that may never be consecutive within a word."""

        self.letters: frozenset[str] = frozenset(ch for side in self.sides for ch in side)
        """Every distinct letter on the board: the set a solution must cover."""

        self.letter_order: tuple[str, ...] = tuple(sorted(self.letters))
        """Board letters in sorted order.  Bit `i` of a coverage mask is `letter_order[i]`."""

        self._letter_bits = {ch: i for i, ch in enumerate(self.letter_order)}

        self.full_mask: frozenbitarray = self.coverage_mask(self.letters)
        """Coverage mask with every board letter set."""

    @property
    def raw_letter_count(self) -> int:
        """Total length of the raw side strings, duplicates included."""
        return sum(len(side) for side in self.sides)

    def coverage_mask(self, chars: Iterable[str]) -> frozenbitarray:
        """Return a mask with a bit set for every board letter in `chars`.

        Characters that are not on the board are ignored.
        """
        mask = zeros(len(self.letter_order))
        for ch in chars:
            bit = self._letter_bits.get(ch)
            if bit is not None:
                mask[bit] = 1
        return frozenbitarray(mask)

    def letters_in(self, mask: frozenbitarray) -> frozenset[str]:
        """Convert a coverage mask back into the set of board letters it covers."""
        return frozenset(self.letter_order[i] for i in mask.search(1))

    def has_forbidden_pair(self, word: str) -> bool:
        """Return whether any two consecutive characters of `word` share a side."""
        return any(pair in self.forbidden_adjacent for pair in pairwise(word))

    def is_eligible(self, word: str, *, min_length: int = 3) -> bool:
        """Return whether `word` can be played on this board.

        Args:
            word: The candidate word.
            min_length: Shortest word the puzzle accepts.

        Returns:
            True if the word is long enough, uses only board letters, and never steps
            between two letters on the same side.
        """
        if not word or len(word) < min_length:
            return False
        if any(ch not in self.letters for ch in word):
            return False
        return not self.has_forbidden_pair(word)

    def __str__(self) -> str:
        """Render the board as a square (sides taken as top, right, bottom, left)."""
        if len(self.sides) != 4 or len({len(side) for side in self.sides}) != 1:
            return " ".join(self.sides)
        top, right, bottom, left = self.sides
        width = 2 * len(top) + 1
        lines = ["  " + " ".join(top)]
        for left_ch, right_ch in zip(left, right):
            lines.append(f"{left_ch}{' ' * width}{right_ch}")
        lines.append("  " + " ".join(bottom))
        return "\n".join(lines)
