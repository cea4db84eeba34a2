"""Text entry points: solve a puzzle given as raw side strings and return a report.

Each result is written as one line, `<covered>/<total> WORD WORD ...`, followed by a blank
line.  `<total>` is the combined length of the four side strings as given.
"""

from collections.abc import Iterable, Sequence

from letterboxed.board import Board
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.search import Result
from letterboxed.solver.search import solve as solve_chains
from letterboxed.wordlist import (
    builtin_word_list,
    parse_word_list,
    resolve_prior_words,
    split_ascii_whitespace,
)


def format_results(results: Iterable[Result], total_letters: int) -> str:
    """Format results as the text report."""
    lines = []
    for words, coverage in results:
        lines.append(" ".join([f"{coverage}/{total_letters}", *words]))
        lines.append("")
    return "".join(line + "\n" for line in lines)


def _solve_report(
    sides: Sequence[str],
    depth: int,
    words: Sequence[str],
    prior_words: Sequence[str] = (),
) -> str:
    board = Board(sides)
    prior = resolve_prior_words(words, prior_words)
    results = solve_chains(
        board,
        words,
        prior,
        max_depth=depth,
        max_results=solver_config.max_results,
    )
    return format_results(results, board.raw_letter_count)


def solve(side_1: str, side_2: str, side_3: str, side_4: str, depth: int) -> str:
    """Solve against the built-in word list."""
    return _solve_report((side_1, side_2, side_3, side_4), depth, builtin_word_list())


def solve_with_dict(
    side_1: str,
    side_2: str,
    side_3: str,
    side_4: str,
    depth: int,
    dictionary: str,
) -> str:
    """Solve against a whitespace-separated dictionary supplied by the caller."""
    words = parse_word_list(dictionary)
    return _solve_report((side_1, side_2, side_3, side_4), depth, words)


def solve_with_prior(
    side_1: str,
    side_2: str,
    side_3: str,
    side_4: str,
    prior_words: str,
    depth: int,
) -> str:
    """Solve against the built-in word list, continuing from words already played.

    Args:
        side_1, side_2, side_3, side_4: The four sides of the board.
        prior_words: Words already played, in order, separated by ASCII whitespace.  Each
            must match a built-in word exactly (case-sensitive).
        depth: Maximum number of words in a chain, prior words included.

    Raises:
        UnknownPriorWordError: If a prior word is not in the built-in list.
    """
    return _solve_report(
        (side_1, side_2, side_3, side_4),
        depth,
        builtin_word_list(),
        split_ascii_whitespace(prior_words),
    )
