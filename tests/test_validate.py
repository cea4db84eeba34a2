"""Tests for chain validation."""

from letterboxed.board import Board
from letterboxed.solver.validate import covered_letters, validate

BOARD = Board(["ELZ", "IVA", "RYU", "CTH"])


class TestValidate:
    """Test cases for the chaining and adjacency rules."""

    def test_valid_chain(self):
        assert validate(BOARD, ["VEHICULAR", "RITZILY"]) is True

    def test_broken_chain(self):
        """RITZILY ends with Y but VEHICULAR starts with V."""
        assert validate(BOARD, ["RITZILY", "VEHICULAR"]) is False

    def test_same_side_step(self):
        assert validate(BOARD, ["VIVA"]) is False

    def test_same_side_step_later_in_chain(self):
        assert validate(BOARD, ["VEHICULAR", "RIVA"]) is False

    def test_empty_chain(self):
        assert validate(BOARD, []) is True

    def test_single_word(self):
        assert validate(BOARD, ["VEHICULAR"]) is True

    def test_coverage_not_required(self):
        """A legal chain that misses letters still validates."""
        assert validate(BOARD, ["RICE"]) is True


class TestCoveredLetters:
    """Test cases for chain coverage."""

    def test_full_coverage(self):
        assert covered_letters(BOARD, ["VEHICULAR", "RITZILY"]) == BOARD.letters

    def test_partial_coverage(self):
        assert covered_letters(BOARD, ["RICE"]) == {"R", "I", "C", "E"}

    def test_off_board_letters_ignored(self):
        assert covered_letters(BOARD, ["RICES"]) == {"R", "I", "C", "E"}
