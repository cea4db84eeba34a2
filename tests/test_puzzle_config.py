"""Tests for the puzzle file loader."""

import pytest

from letterboxed.puzzle_config import PuzzleConfig, load_configs, parse_block
from letterboxed.solver.config import config as solver_config


class TestLoadConfigs:
    """Test cases for reading puzzle files."""

    def test_load(self, tmp_path):
        path = tmp_path / "puzzles.txt"
        path.write_text(
            "oal nuk cet rpi\n3\n\n\nRTF USY HIA OEB\n2\nstatutory\n\nELZ IVA RYU CTH\n",
            encoding="utf-8",
        )
        configs = load_configs(path)
        assert configs == [
            PuzzleConfig(sides=("OAL", "NUK", "CET", "RPI"), max_depth=3),
            PuzzleConfig(
                sides=("RTF", "USY", "HIA", "OEB"), max_depth=2, prior_words=("STATUTORY",)
            ),
            PuzzleConfig(sides=("ELZ", "IVA", "RYU", "CTH"), max_depth=solver_config.max_depth),
        ]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_configs(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "puzzles.txt"
        path.write_text("\n\n", encoding="utf-8")
        assert load_configs(path) == []


class TestParseBlock:
    """Test cases for malformed puzzle blocks."""

    def test_wrong_number_of_sides(self):
        with pytest.raises(ValueError, match="Expected 4 sides"):
            parse_block(["OAL NUK CET"])

    def test_bad_depth(self):
        with pytest.raises(ValueError, match="Invalid maximum chain length"):
            parse_block(["OAL NUK CET RPI", "three"])

    def test_too_many_lines(self):
        with pytest.raises(ValueError, match="Too many lines"):
            parse_block(["OAL NUK CET RPI", "3", "PELICAN", "EXTRA"])


class TestPuzzleConfig:
    """Test cases for puzzle validation and naming."""

    def test_depth_must_be_positive(self):
        with pytest.raises(ValueError, match="at least 1"):
            PuzzleConfig(sides=("OAL", "NUK", "CET", "RPI"), max_depth=0)

    def test_sides_must_not_be_empty(self):
        with pytest.raises(ValueError, match="must not be empty"):
            PuzzleConfig(sides=("OAL", "", "CET", "RPI"), max_depth=2)

    def test_name_and_str(self):
        config = PuzzleConfig(
            sides=("RTF", "USY", "HIA", "OEB"), max_depth=2, prior_words=("STATUTORY",)
        )
        assert config.name == "RTF_USY_HIA_OEB-2"
        assert str(config) == "RTF USY HIA OEB (max 2 words), after STATUTORY"
