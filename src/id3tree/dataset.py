"""Immutable tabular view over categorical training rows."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from loguru import logger
from pydantic import BaseModel, Field

from id3tree.exceptions import DuplicateColumnsError, EmptyDatasetError, TargetColumnNotFoundError

type Row = tuple[str, ...]


class DatasetSummary(BaseModel):
    """Shape and schema of a training dataset.

    Attributes:
        row_count (int): Number of data rows.
        column_count (int): Number of header columns.
        headers (list[str]): Header names in file order.
        target (str): The target column name.
    """

    row_count: int = Field(ge=1, description="Number of data rows.")
    column_count: int = Field(ge=1, description="Number of header columns.")
    headers: list[str] = Field(description="Header names in file order.")
    target: str = Field(description="The target column name.")

    def __str__(self) -> str:
        return "\n".join([
            "Dataset Information:",
            "===================",
            f"Rows: {self.row_count}",
            f"Columns: {self.column_count}",
            f"Features: {' '.join(self.headers)}",
            f"Target: {self.target}",
        ])


@dataclass(frozen=True, slots=True)
class Dataset:
    """Read-only table of string rows with a designated target column.

    Rows are referenced by position everywhere in the tree builder; nothing
    copies row data once the dataset is built. Use `Dataset.from_rows` to
    construct one so headers and target are validated.

    Attributes:
        headers (tuple[str, ...]): Unique column names in file order.
        rows (tuple[Row, ...]): Data rows, each as wide as `headers`.
        target (str): Name of the class label column.

    Examples:
        >>> ds = Dataset.from_rows(["Wind", "Play"], [["Weak", "Yes"], ["Strong", "No"]], target="Play")
        >>> ds.value_at(1, "Wind")
        'Strong'
        >>> ds.column_index("Humidity") is None
        True
    """

    headers: tuple[str, ...]
    rows: tuple[Row, ...]
    target: str
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions = {name: position for position, name in enumerate(self.headers)}
        object.__setattr__(self, "_positions", MappingProxyType(positions))

    @classmethod
    def from_rows(
        cls,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        *,
        target: str,
    ) -> Dataset:
        """Validate headers and target, then freeze the rows into a dataset.

        Row widths are not checked; a row narrower or wider than `headers`
        produces undefined lookups later on.

        Args:
            headers (Sequence[str]): Column names; must be unique.
            rows (Sequence[Sequence[str]]): Data rows of string cells.
            target (str): Target column name; must match a header exactly.

        Returns:
            Dataset: The immutable dataset view.

        Raises:
            DuplicateColumnsError: If a header name repeats.
            EmptyDatasetError: If `rows` is empty.
            TargetColumnNotFoundError: If `target` is not in `headers`.
        """
        header_list = list(headers)
        if len(header_list) != len(set(header_list)):
            error = DuplicateColumnsError(columns=header_list)
            logger.warning("Dataset rejected", reason=str(error), duplicates=error.duplicate_columns)
            raise error
        if not rows:
            logger.warning("Dataset rejected", reason="no data rows")
            raise EmptyDatasetError()
        if target not in header_list:
            logger.warning("Dataset rejected", reason="unknown target column", target=target)
            raise TargetColumnNotFoundError(target=target, available_columns=header_list)

        return cls(
            headers=tuple(header_list),
            rows=tuple(tuple(row) for row in rows),
            target=target,
        )

    def __len__(self) -> int:
        return len(self.rows)

    def column_index(self, name: str) -> int | None:
        """Return the position of column `name`, or None when it is absent."""
        return self._positions.get(name)

    def value_at(self, row_index: int, column_name: str) -> str:
        """Return the cell at `row_index` in column `column_name`.

        The column must exist; check with `column_index` first when unsure.
        """
        return self.rows[row_index][self._positions[column_name]]

    def target_value(self, row_index: int) -> str:
        """Return the class label of row `row_index`."""
        return self.value_at(row_index, self.target)

    @property
    def feature_columns(self) -> tuple[str, ...]:
        """Every header except the target, in header order."""
        return tuple(name for name in self.headers if name != self.target)

    def all_indices(self) -> range:
        """Return the index subset covering every row."""
        return range(len(self.rows))

    def summary(self) -> DatasetSummary:
        """Describe the dataset's shape and schema."""
        return DatasetSummary(
            row_count=len(self.rows),
            column_count=len(self.headers),
            headers=list(self.headers),
            target=self.target,
        )
