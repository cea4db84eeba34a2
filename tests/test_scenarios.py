"""End-to-end puzzles against the built-in word list.

Checks the properties every search must keep: results are legal chains, full results really
cover the board, shorter chains come first, and prior words are always kept.
"""

import pytest

from letterboxed.board import Board
from letterboxed.solver.search import solve
from letterboxed.solver.validate import covered_letters, validate
from letterboxed.wordlist import builtin_word_list, resolve_prior_words

MAX_RESULTS = 25

PUZZLES = [
    (["OAL", "NUK", "CET", "RPI"], 3),
    (["ELZ", "IVA", "RYU", "CTH"], 4),
    (["RTF", "USY", "HIA", "OEB"], 2),
]


@pytest.fixture(scope="module")
def words():
    return builtin_word_list()


@pytest.mark.parametrize("sides,max_depth", PUZZLES)
class TestBuiltinPuzzles:
    """Properties of the results for known puzzles."""

    def test_results_validate(self, words, sides, max_depth):
        board = Board(sides)
        results = solve(board, words, max_depth=max_depth, max_results=MAX_RESULTS)
        assert results
        for result in results:
            assert validate(board, result.words)
            assert len(result.words) <= max_depth

    def test_coverage_is_correct(self, words, sides, max_depth):
        board = Board(sides)
        results = solve(board, words, max_depth=max_depth, max_results=MAX_RESULTS)
        for result in results:
            assert len(covered_letters(board, result.words)) == result.coverage

    def test_full_results_come_shortest_first(self, words, sides, max_depth):
        board = Board(sides)
        results = solve(board, words, max_depth=max_depth, max_results=MAX_RESULTS)
        full = [r for r in results if r.coverage == len(board.letters)]
        lengths = [len(r.words) for r in full]
        assert lengths == sorted(lengths)
        assert len(full) <= MAX_RESULTS

    def test_single_best_effort_when_unsolved(self, words, sides, max_depth):
        board = Board(sides)
        results = solve(board, words, max_depth=max_depth, max_results=MAX_RESULTS)
        if results[0].coverage < len(board.letters):
            assert len(results) == 1


def test_two_word_solution(words):
    """VEHICULAR then RITZILY covers this board, so the first result has two words."""
    board = Board(["ELZ", "IVA", "RYU", "CTH"])
    results = solve(board, words, max_depth=4, max_results=MAX_RESULTS)
    assert results[0].coverage == 12
    assert len(results[0].words) <= 2
    assert any(r.words == ["VEHICULAR", "RITZILY"] for r in results if len(r.words) == 2)


def test_resume_from_prior_word(words):
    board = Board(["RTF", "USY", "HIA", "OEB"])
    prior = resolve_prior_words(words, ["STATUTORY"])
    results = solve(board, words, prior, max_depth=2, max_results=MAX_RESULTS)
    assert results
    for result in results:
        assert result.words[0] == "STATUTORY"
        assert validate(board, result.words)


def test_no_eligible_words():
    board = Board(["ELZ", "IVA", "RYU", "CTH"])
    results = solve(board, ["QQQ", "AB", "VIVA"], max_depth=3, max_results=MAX_RESULTS)
    assert len(results) == 1
    assert results[0].words == []
    assert results[0].coverage == 0
