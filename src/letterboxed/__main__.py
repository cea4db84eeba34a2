"""Run the Letter Boxed solver: `python -m letterboxed <path_to_puzzle_file>`."""

from letterboxed import main

main()
