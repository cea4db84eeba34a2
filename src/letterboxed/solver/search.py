"""Breadth-first search for word chains that cover the board."""

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from time import time
from typing import NamedTuple, TextIO

from bitarray import frozenbitarray

from letterboxed.board import Board
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.graph import TransitionGraph, build_transition_graph


class Result(NamedTuple):
    """A word chain and the number of distinct board letters it covers."""

    words: list[str]
    coverage: int


@dataclass(frozen=True)
class SearchState:
    """A point in the search: where the chain ends and which letters it has used.

    Two states are equal when `current` and `visited` match.  The path that led to the
    state is carried along for reconstruction only.
    """

    current: str
    """Letter the next word must start with."""

    visited: frozenbitarray
    """Coverage mask of the board letters used so far."""

    path: tuple[int, ...] = field(compare=False)
    """Word indices of the chain so far, prior words included."""


@dataclass
class SearchStats:
    """Statistics collected during a search."""

    states_examined: int = 0
    """Number of states taken off the queue."""

    states_enqueued: int = 0
    """Number of states put on the queue, seeds included."""

    max_queue_size: int = 0
    """Largest queue length seen."""

    eligible_words: int = 0
    """Number of words playable on the board."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""


def seed_states(
    board: Board,
    graph: TransitionGraph,
    words: Sequence[str],
    prior: Sequence[int],
) -> Iterator[SearchState]:
    """Yield the states the search starts from.

    With prior words, there is exactly one seed: the chain ends at the last letter of the
    last prior word and has covered every board letter of every prior word.  Without, there
    is one seed per letter that begins an eligible word.
    """
    if prior:
        prior_words = [words[i] for i in prior]
        yield SearchState(
            current=prior_words[-1][-1:],
            visited=board.coverage_mask("".join(prior_words)),
            path=tuple(prior),
        )
        return

    for letter in graph.start_letters():
        yield SearchState(current=letter, visited=board.coverage_mask(letter), path=())


def solve(
    board: Board,
    words: Sequence[str],
    prior: Sequence[int] = (),
    *,
    max_depth: int | None = None,
    max_results: int | None = None,
    stats: SearchStats | None = None,
    out: TextIO | None = None,
) -> list[Result]:
    """Find the shortest word chains that use every letter on the board.

    States are processed first-in-first-out, so chains are found in non-decreasing order of
    word count.  Revisiting an equal state through a different path is allowed; the work is
    bounded by `max_depth` and the output by `max_results`.

    If no chain covers the whole board within `max_depth` words, a single best-effort result
    is returned instead: the chain that covered the most letters, shortest first.

    Args:
        board (Board): The puzzle board.
        words (Sequence[str]): Candidate words.
        prior (Sequence[int]): Indices into `words` of a chain already played.  Every result
            starts with these words.
        max_depth (int | None): Maximum number of words in a chain, prior words included.
            Defaults to the configured `max_depth`.
        max_results (int | None): Stop once this many full-coverage chains are found.
            Defaults to the configured `max_results`.
        stats (SearchStats | None): Optional stats object, updated in place.
        out (TextIO | None): Optional stream for progress reports.

    Returns:
        A non-empty list of Results, in the order they were found.
    """
    if max_depth is None:
        max_depth = solver_config.max_depth
    if max_results is None:
        max_results = solver_config.max_results
    if stats is None:
        stats = SearchStats()

    graph = build_transition_graph(board, words, min_length=solver_config.min_word_length)
    stats.eligible_words = graph.size

    queue = deque(seed_states(board, graph, words, prior))
    stats.states_enqueued += len(queue)

    found: list[tuple[int, ...]] = []
    best_coverage = 0
    best_path: tuple[int, ...] = ()
    if prior and queue:
        best_coverage, best_path = queue[0].visited.count(), queue[0].path

    while queue and len(found) < max_results:
        stats.max_queue_size = max(stats.max_queue_size, len(queue))
        state = queue.popleft()
        stats.states_examined += 1
        if (
            out is not None
            and solver_config.report_interval > 0
            and stats.states_examined % solver_config.report_interval == 0
        ):
            print(
                f"Examined {stats.states_examined:,} states "
                f"(queue: {len(queue):,}, found: {len(found)}, depth: {len(state.path)})",
                file=out,
                flush=True,
            )

        # Keep track of the best partial chain, in case nothing covers the board.  A seed
        # with no words has not covered its start letter yet.
        coverage = state.visited.count()
        if state.path and (
            coverage > best_coverage
            or (coverage == best_coverage and len(state.path) < len(best_path))
        ):
            best_coverage, best_path = coverage, state.path

        if state.visited == board.full_mask:
            found.append(state.path)
            continue

        if len(state.path) + 1 > max_depth:
            continue

        for next_letter, idx in graph.outgoing(state.current):
            word_mask = graph.coverage[idx]
            # Only follow words that use at least one new letter
            if not (word_mask & ~state.visited).any():
                continue
            queue.append(
                SearchState(
                    current=next_letter,
                    visited=state.visited | word_mask,
                    path=state.path + (idx,),
                )
            )
            stats.states_enqueued += 1

    if out is not None:
        print(
            f"Search finished: {stats.states_examined:,} states examined, "
            f"{len(found)} full chains found, {time() - stats.start_time:.2f}s",
            file=out,
            flush=True,
        )

    if not found:
        return [Result([words[i] for i in best_path], best_coverage)]
    n_letters = len(board.letters)
    return [Result([words[i] for i in path], n_letters) for path in found]
