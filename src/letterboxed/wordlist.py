"""Module for word list management in Letter Boxed."""

import re
from collections.abc import Sequence
from functools import lru_cache
from os import PathLike
from pathlib import Path

BUILTIN_WORD_LIST_PATH = Path(__file__).parent / "data" / "words.txt"
"""Packaged word list: one uppercase word per line."""

ASCII_WHITESPACE = re.compile(r"[ \t\n\r\f]+")
"""Separator for caller-supplied word text.  Other Unicode spaces are part of a word."""


class UnknownPriorWordError(ValueError):
    """A prior word was not found in the word list being solved against."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Prior word not in the word list: '{word}'")
        self.word = word


def load_word_list(path: str | PathLike) -> tuple[str, ...]:
    """Load a newline-separated word list.

    Args:
        path: Path to the word list file.

    Returns:
        The words, upper-cased, in file order.  Blank lines are skipped; duplicates are kept.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return tuple(stripped.upper() for line in f if (stripped := line.strip()))


def load_builtin_word_list() -> tuple[str, ...]:
    """Load the word list shipped with the package."""
    return load_word_list(BUILTIN_WORD_LIST_PATH)


@lru_cache(maxsize=1)
def builtin_word_list() -> tuple[str, ...]:
    """Return the built-in word list, loaded once per process.

    The returned tuple is shared between callers and is never modified.
    """
    return load_builtin_word_list()


def split_ascii_whitespace(text: str) -> list[str]:
    """Split text on runs of ASCII whitespace, dropping empty tokens."""
    return [token for token in ASCII_WHITESPACE.split(text) if token]


def parse_word_list(text: str) -> list[str]:
    """Split caller-supplied dictionary text on ASCII whitespace, keeping words verbatim."""
    return split_ascii_whitespace(text)


def resolve_prior_words(words: Sequence[str], prior: Sequence[str]) -> list[int]:
    """Map prior words to the index of their first exact occurrence in `words`.

    Args:
        words: The word list being solved against.
        prior: Words already played, in order.

    Returns:
        Indices into `words`, one per prior word.

    Raises:
        UnknownPriorWordError: If a prior word does not appear in `words`.
    """
    first_index: dict[str, int] = {}
    for idx, word in enumerate(words):
        first_index.setdefault(word, idx)

    indices = []
    for word in prior:
        if word not in first_index:
            raise UnknownPriorWordError(word)
        indices.append(first_index[word])
    return indices
