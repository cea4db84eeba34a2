"""Loader for puzzle files."""

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from letterboxed.solver.config import config as solver_config


@dataclass
class PuzzleConfig:
    """A puzzle to solve."""

    sides: tuple[str, str, str, str]
    """The four sides of the board (top, right, bottom, left)."""

    max_depth: int = field(default_factory=lambda: solver_config.max_depth)
    """Maximum number of words in a chain, prior words included."""

    prior_words: tuple[str, ...] = ()
    """Words already played, in order."""

    def __post_init__(self) -> None:
        """Validate the puzzle."""
        if len(self.sides) != 4:
            raise ValueError(f"Expected 4 sides, got {len(self.sides)}: {self.sides}")
        if not all(self.sides):
            raise ValueError(f"Sides must not be empty: {self.sides}")
        if self.max_depth < 1:
            raise ValueError(f"Maximum chain length must be at least 1, got {self.max_depth}")

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        ret = f"{' '.join(self.sides)} (max {self.max_depth} words)"
        if self.prior_words:
            ret += f", after {' '.join(self.prior_words)}"
        return ret

    @property
    def name(self) -> str:
        """Short identifier for the puzzle, used for log file names."""
        return f"{'_'.join(self.sides)}-{self.max_depth}"


def clean(line: str) -> list[str]:
    """Split a puzzle file line into upper-cased tokens."""
    return line.upper().split()


def parse_block(lines: list[str]) -> PuzzleConfig:
    """Parse one puzzle block: sides, then optional depth, then optional prior words."""
    if len(lines) > 3:
        raise ValueError(f"Too many lines in puzzle block: {lines}")

    sides = tuple(clean(lines[0]))
    if len(sides) != 4:
        raise ValueError(f"Expected 4 sides, got {len(sides)}: '{lines[0]}'")

    kwargs = {}
    if len(lines) > 1:
        try:
            kwargs["max_depth"] = int(lines[1])
        except ValueError:
            raise ValueError(f"Invalid maximum chain length: '{lines[1]}'") from None
    if len(lines) > 2:
        kwargs["prior_words"] = tuple(clean(lines[2]))

    return PuzzleConfig(sides=sides, **kwargs)


def load_configs(configs_path: str | PathLike) -> list[PuzzleConfig]:
    """Load puzzles from the given file.

    Puzzles are separated by blank lines.  The first line of each puzzle holds the four
    sides, the optional second line the maximum chain length, and the optional third line
    the words already played:

        OAL NUK CET RPI
        3

        RTF USY HIA OEB
        2
        STATUTORY

    Args:
        configs_path: Path to the puzzle file.
    """
    path = Path(configs_path)
    if not path.is_file():
        raise FileNotFoundError(f"Puzzle file not found: {path}")

    configs = []
    block: list[str] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            stripped = line.strip()
            if stripped:
                block.append(stripped)
                continue
            if block:
                configs.append(parse_block(block))
                block = []
    if block:
        configs.append(parse_block(block))

    return configs
