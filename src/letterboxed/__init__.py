"""Letter Boxed Puzzle Solver.

Finds the shortest chains of words that use every letter around a Letter Boxed square.
Consecutive letters in a word must come from different sides, and each word starts with
the last letter of the word before it.  Uses a breadth-first search over the words that
can be played on the board.
"""

from sys import argv, exit

from .puzzle_config import load_configs
from .solver import solver
from .solver.config import config as solver_config
from .wordlist import builtin_word_list, load_word_list


def main() -> None:
    """Main entry point for the Letter Boxed solver."""
    # Expect a single argument: path to the puzzle file
    if len(argv) != 2:
        print("Usage: python -m letterboxed <path_to_puzzle_file>")
        exit(1)
    configs = load_configs(argv[1])

    if solver_config.word_list_path is None:
        words = builtin_word_list()
    else:
        words = load_word_list(solver_config.word_list_path)
    print(f"Loaded {len(words):,} words")

    for config in configs:
        solver.run(config, words)
        print()
