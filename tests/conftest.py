"""Shared fixtures: the classic 14-row play-golf dataset."""

from __future__ import annotations

from pathlib import Path

import pytest

from id3tree.dataset import Dataset

GOLF_HEADERS: list[str] = ["Outlook", "Temperature", "Humidity", "Wind", "Play"]

GOLF_ROWS: list[list[str]] = [
    ["Sunny", "Hot", "High", "Weak", "No"],
    ["Sunny", "Hot", "High", "Strong", "No"],
    ["Overcast", "Hot", "High", "Weak", "Yes"],
    ["Rain", "Mild", "High", "Weak", "Yes"],
    ["Rain", "Cool", "Normal", "Weak", "Yes"],
    ["Rain", "Cool", "Normal", "Strong", "No"],
    ["Overcast", "Cool", "Normal", "Strong", "Yes"],
    ["Sunny", "Mild", "High", "Weak", "No"],
    ["Sunny", "Cool", "Normal", "Weak", "Yes"],
    ["Rain", "Mild", "Normal", "Weak", "Yes"],
    ["Sunny", "Mild", "Normal", "Strong", "Yes"],
    ["Overcast", "Mild", "High", "Strong", "Yes"],
    ["Overcast", "Hot", "Normal", "Weak", "Yes"],
    ["Rain", "Mild", "High", "Strong", "No"],
]


@pytest.fixture
def golf_dataset() -> Dataset:
    """Return the play-golf dataset with `Play` as the target."""
    return Dataset.from_rows(GOLF_HEADERS, GOLF_ROWS, target="Play")


@pytest.fixture
def golf_csv(tmp_path: Path) -> Path:
    """Write the play-golf dataset to a CSV file and return its path."""
    path = tmp_path / "golf.csv"
    lines = [",".join(GOLF_HEADERS), *(",".join(row) for row in GOLF_ROWS)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep `ID3TREE_*` variables and stray `.env` files out of every test."""
    for name in ("CSV_PATH", "TARGET", "SEPARATOR", "LOG_LEVEL", "QUIT_COMMAND"):
        monkeypatch.delenv(f"ID3TREE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
