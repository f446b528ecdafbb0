"""Tests for `ClassifierSettings`."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError
from pytest_check import check

from id3tree.config import ClassifierSettings


class TestClassifierSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self) -> None:
        """Without environment variables, only the fixed defaults are set."""
        # Act
        settings = ClassifierSettings()

        # Assert
        with check:
            assert settings.csv_path is None
        with check:
            assert settings.target is None
        with check:
            assert settings.separator == ","
        with check:
            assert settings.log_level is None
        with check:
            assert settings.quit_command == "quit"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """`ID3TREE_*` variables should populate the matching fields."""
        # Arrange
        monkeypatch.setenv("ID3TREE_CSV_PATH", "data/golf.csv")
        monkeypatch.setenv("ID3TREE_TARGET", "Play")
        monkeypatch.setenv("ID3TREE_LOG_LEVEL", "DEBUG")

        # Act
        settings = ClassifierSettings()

        # Assert
        with check:
            assert settings.csv_path == Path("data/golf.csv")
        with check:
            assert settings.target == "Play"
        with check:
            assert settings.log_level == "DEBUG"

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        """A `.env` file in the working directory should be honoured."""
        # Arrange - the autouse fixture has already moved into tmp_path
        (tmp_path / ".env").write_text("ID3TREE_TARGET=Label\n", encoding="utf-8")

        # Act / Assert
        assert ClassifierSettings().target == "Label"

    def test_rejects_multi_character_separator(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The separator must be a single character."""
        # Arrange
        monkeypatch.setenv("ID3TREE_SEPARATOR", "::")

        # Act / Assert
        with pytest.raises(ValidationError):
            ClassifierSettings()

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only the supported log levels are accepted."""
        # Arrange
        monkeypatch.setenv("ID3TREE_LOG_LEVEL", "VERBOSE")

        # Act / Assert
        with pytest.raises(ValidationError):
            ClassifierSettings()
