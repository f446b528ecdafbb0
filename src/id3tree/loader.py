"""Loading delimited text files into a `Dataset` with Polars."""

from __future__ import annotations

from pathlib import Path

import polars as pl
from loguru import logger

from id3tree.dataset import Dataset
from id3tree.exceptions import DatasetLoadError, EmptyDatasetError

_STRIP_CHARS = " \t"


def load_csv(path: str | Path, target: str, *, separator: str = ",") -> Dataset:
    """Read a headed, delimited file of categorical values into a dataset.

    The first line is the header. Every cell is read as a string, spaces and
    tabs around header names and cell values are trimmed, and empty cells
    become empty strings.

    Args:
        path (str | Path): Location of the file.
        target (str): Target column name; must match a trimmed header exactly.
        separator (str): Single-character field delimiter. Defaults to ",".

    Returns:
        Dataset: The loaded dataset.

    Raises:
        DatasetLoadError: If the file cannot be opened or parsed.
        EmptyDatasetError: If the file holds a header but no data rows.
        TargetColumnNotFoundError: If `target` is not a header.
        DuplicateColumnsError: If a header name repeats.
    """
    source = Path(path)
    logger.info("Loading dataset", path=str(source), target=target)
    try:
        # Read the header as a data row so duplicate names survive unchanged.
        raw = pl.read_csv(source, has_header=False, infer_schema=False, separator=separator)
    except (OSError, pl.exceptions.PolarsError) as exc:
        logger.warning("Dataset load failed", path=str(source), error_type=type(exc).__name__)
        raise DatasetLoadError(f"Cannot open file {source}: {exc}", source=source) from exc

    if raw.height == 0:
        raise DatasetLoadError(f"File {source} has no header row", source=source)

    cleaned = _clean_cells(raw)
    header, *rows = cleaned.rows()
    return Dataset.from_rows([str(name) for name in header], rows, target=target)


def dataset_from_frame(frame: pl.DataFrame, target: str) -> Dataset:
    """Build a dataset from an in-memory Polars DataFrame.

    Every column is cast to a string. Spaces and tabs around column names and
    cell values are trimmed, as `load_csv` does, and nulls become empty
    strings.

    Args:
        frame (pl.DataFrame): Source table; its column names are the headers.
        target (str): Target column name.

    Returns:
        Dataset: The dataset view.

    Raises:
        EmptyDatasetError: If `frame` has no rows.
        TargetColumnNotFoundError: If `target` is not a column of `frame`.
    """
    if frame.height == 0:
        logger.warning("Dataset rejected", reason="no data rows")
        raise EmptyDatasetError()
    as_strings = frame.select(pl.all().cast(pl.String))
    headers = [name.strip(_STRIP_CHARS) for name in frame.columns]
    return Dataset.from_rows(headers, _clean_cells(as_strings).rows(), target=target)


def _clean_cells(frame: pl.DataFrame) -> pl.DataFrame:
    """Trim spaces/tabs in every string cell and replace nulls with ''."""
    return frame.with_columns(pl.all().str.strip_chars(_STRIP_CHARS).fill_null(""))
