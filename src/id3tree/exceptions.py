"""Custom exceptions for id3tree.

Training exceptions (subclass TrainingError):
- DatasetLoadError: Raised when the training source cannot be read or parsed.
- EmptyDatasetError: Raised when the source has a header but no data rows.
- TargetColumnNotFoundError: Raised when the target column is not a header.

Input validation exceptions (subclass ValueError):
- DuplicateColumnsError: Raised when header names repeat.
- InvalidInstanceFormatError: Raised when an instance string has no
  ``feature=value`` pair.

Unseen or missing feature values at prediction time are not errors; the
predictor answers ``"unknown"`` for them.
"""

from __future__ import annotations

from pathlib import Path


class TrainingError(Exception):
    """Base exception for every failure that aborts a training attempt.

    Catch this to handle any training failure; the process can retry with
    corrected input.

    Attributes:
        message (str): Human-readable description of the failure.
    """

    message: str

    def __init__(self, message: str) -> None:
        """Initialize TrainingError.

        Args:
            message (str): Description of the failure.
        """
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class DatasetLoadError(TrainingError):
    """Raised when a training source is unreadable or cannot be parsed.

    Attributes:
        source (str): The path or description of the source that failed.

    Examples:
        >>> err = DatasetLoadError("Cannot open file golf.csv", source="golf.csv")
        >>> err.source
        'golf.csv'
    """

    source: str

    def __init__(self, message: str, *, source: str | Path) -> None:
        """Initialize DatasetLoadError.

        Args:
            message (str): Description of the load failure.
            source (str | Path): The path or description of the source.
        """
        super().__init__(message)
        self.source = str(source)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, source={self.source!r})"


class EmptyDatasetError(TrainingError):
    """Raised when a dataset has no data rows after the header."""

    def __init__(self, message: str = "No data loaded") -> None:
        super().__init__(message)


class TargetColumnNotFoundError(TrainingError, ValueError):
    """Raised when the requested target column is not one of the headers.

    Attributes:
        target (str): The requested target column name.
        available_columns (list[str]): Header names present in the dataset.

    Examples:
        >>> err = TargetColumnNotFoundError(target="play", available_columns=["Outlook", "Play"])
        >>> str(err)
        "Target column 'play' not found"
    """

    target: str
    available_columns: list[str]

    def __init__(self, target: str, available_columns: list[str]) -> None:
        """Initialize TargetColumnNotFoundError.

        Args:
            target (str): The requested target column name.
            available_columns (list[str]): Header names present in the dataset.
        """
        super().__init__(f"Target column '{target}' not found")
        self.target = target
        self.available_columns = available_columns

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"target={self.target!r}, available_columns={self.available_columns!r})"
        )


class DuplicateColumnsError(ValueError):
    """Raised when duplicate header names are provided.

    Attributes:
        columns (list[str]): The header list that contains duplicates.
        duplicate_columns (list[str]): The repeated names, in the order their
            second occurrence appears.

    Examples:
        >>> err = DuplicateColumnsError(columns=["a", "a", "b"])
        >>> err.duplicate_columns
        ['a']
    """

    columns: list[str]
    duplicate_columns: list[str]

    def __init__(self, columns: list[str]) -> None:
        """Initialize DuplicateColumnsError.

        Args:
            columns (list[str]): The header list containing duplicates.
        """
        super().__init__("Duplicate column names are not allowed")
        self.columns = columns
        seen: set[str] = set()
        self.duplicate_columns = []
        for col in columns:
            if col in seen and col not in self.duplicate_columns:
                self.duplicate_columns.append(col)
            seen.add(col)


class InvalidInstanceFormatError(ValueError):
    """Raised when an instance string contains no ``feature=value`` pair.

    Attributes:
        text (str): The raw input that failed to parse.
    """

    text: str

    def __init__(self, text: str) -> None:
        """Initialize InvalidInstanceFormatError.

        Args:
            text (str): The raw input that failed to parse.
        """
        super().__init__("Invalid input format. Use: feature1=value1,feature2=value2")
        self.text = text
