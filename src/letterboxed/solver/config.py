"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    max_depth: int = 3
    """Maximum number of words in a chain, prior words included. Default: 3."""

    max_results: int = 25
    """Stop searching once this many full-coverage chains have been found. Default: 25."""

    min_word_length: int = 3
    """Shortest word the puzzle accepts. Default: 3."""

    word_list_path: str | None = None
    """Path to a newline-separated word list. If None (default), uses the built-in list."""

    report_interval: int = 100_000
    """Interval (in number of search states examined) at which to report progress."""

    log_dir: str = "logs"
    """Directory that per-puzzle log files are written to. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_prefix="LETTERBOXED_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
