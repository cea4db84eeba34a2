"""Main solver module for Letter Boxed puzzles."""

import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from letterboxed.board import Board
from letterboxed.puzzle_config import PuzzleConfig
from letterboxed.report import format_results
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.search import Result, SearchStats, solve
from letterboxed.solver.validate import covered_letters, validate
from letterboxed.wordlist import resolve_prior_words

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def run(config: PuzzleConfig, words: Sequence[str]) -> list[Result]:
    """Run the solver on the given puzzle, logging to a per-puzzle log file.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        words (Sequence[str]): The word list to solve against.

    Returns:
        The results of the search.
    """
    print(f"config: {config}")

    logfile = Path(solver_config.log_dir) / f"{config.name}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            results = solve_one(config, words, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    print(format_results(results, sum(len(side) for side in config.sides)), end="")
    return results


def solve_one(config: PuzzleConfig, words: Sequence[str], *, logf: TextIO) -> list[Result]:
    """Solve a single puzzle and write the details of the search to `logf`.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        words (Sequence[str]): The word list to solve against.
        logf: File object to log the solving process.

    Raises:
        UnknownPriorWordError: If a prior word is not in `words`.
    """
    board = Board(config.sides)
    print("Board:", file=logf, flush=True)
    print("", file=logf, flush=True)
    print(board, file=logf, flush=True)
    print("", file=logf, flush=True)
    print(f"Letters: {''.join(board.letter_order)}", file=logf, flush=True)
    print(f"Word list size: {len(words):,}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)

    prior = resolve_prior_words(words, config.prior_words)
    if prior:
        print(f"Prior words: {' '.join(config.prior_words)}", file=logf, flush=True)

    stats = SearchStats()
    start_time_str = datetime.fromtimestamp(stats.start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("", file=logf, flush=True)

    results = solve(
        board,
        words,
        prior,
        max_depth=config.max_depth,
        max_results=solver_config.max_results,
        stats=stats,
        out=logf,
    )

    print("", file=logf, flush=True)
    print(f"Eligible words: {stats.eligible_words:,}", file=logf, flush=True)
    print(f"States examined: {stats.states_examined:,}", file=logf, flush=True)
    print(f"States enqueued: {stats.states_enqueued:,}", file=logf, flush=True)
    print(f"Largest queue: {stats.max_queue_size:,}", file=logf, flush=True)
    print(f"Time taken: {time() - stats.start_time:.3f}s", file=logf, flush=True)
    print("", file=logf, flush=True)

    if results[0].coverage == len(board.letters):
        print(f"Found {len(results)} solution(s):", file=logf, flush=True)
    else:
        missing = board.letters - covered_letters(board, results[0].words)
        print(
            f"No solution within {config.max_depth} words; best effort misses "
            f"{''.join(sorted(missing))}:",
            file=logf,
            flush=True,
        )
    for result in results:
        print(f"  {result.coverage}/{len(board.letters)} {' '.join(result.words)}", file=logf)
        # Prior words are taken as played, so a chain can still break the board rules
        if not validate(board, result.words):
            print("    Warning: chain breaks the board rules", file=logf)
    logf.flush()

    return results
