"""Chain search, transition graph and validation for Letter Boxed puzzles."""

from .graph import TransitionGraph, build_transition_graph
from .search import Result, SearchState, SearchStats, solve
from .validate import covered_letters, validate

__all__ = [
    "Result",
    "SearchState",
    "SearchStats",
    "TransitionGraph",
    "build_transition_graph",
    "covered_letters",
    "solve",
    "validate",
]
