"""Environment-driven settings for the id3tree command line."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from id3tree.logging import LogLevel


class ClassifierSettings(
    BaseSettings,
    env_prefix="ID3TREE_",
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
):
    """Defaults for the command line, read from `ID3TREE_*` variables or `.env`.

    Command-line arguments take precedence over these values; anything still
    missing is asked for interactively.

    Attributes:
        csv_path (Path | None): Training file to load.
        target (str | None): Target column name.
        separator (str): Field delimiter of the training file.
        log_level (LogLevel | None): When set, id3tree logging is enabled on
            stderr at this level.
        quit_command (str): Input that ends the prediction session.
    """

    csv_path: Path | None = Field(default=None, description="Training file to load.")
    target: str | None = Field(default=None, description="Target column name.")
    separator: str = Field(default=",", min_length=1, max_length=1, description="Field delimiter.")
    log_level: LogLevel | None = Field(default=None, description="Enable logging at this level when set.")
    quit_command: str = Field(default="quit", min_length=1, description="Input that ends the session.")
