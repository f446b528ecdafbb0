"""Loguru setup for id3tree: the TRAINING level and an opt-in text handler.

The package logger is disabled on import. ``enable_logging()`` switches it on
and writes id3tree records to a text stream, stderr unless told otherwise;
the command line passes its own error stream when ``--log-level`` is given.
"""

from __future__ import annotations

import contextlib
import sys
import warnings
from typing import TYPE_CHECKING, Final, Literal, TextIO

from loguru import logger

if TYPE_CHECKING:
    from types import TracebackType

    from loguru import Record

PACKAGE_NAME: Final[str] = __name__.split(".")[0]

# Training lifecycle events sit between INFO (20) and WARNING (30)
TRAINING_LEVEL: Final[str] = "TRAINING"
TRAINING_LEVEL_NUMBER: Final[int] = 25

type LogLevel = Literal[
    "TRACE",
    "DEBUG",
    "INFO",
    "TRAINING",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_RECORD_FORMAT: Final[str] = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "  # noqa: RUF027 - loguru format string
    "<cyan>{function}</cyan> - "
    "<level>{message}</level> {extra}"
)

# Handlers added by enable_logging() and not yet removed.
_open_handler_ids: set[int] = set()

try:
    _existing_level = logger.level(TRAINING_LEVEL)
except ValueError:
    logger.level(TRAINING_LEVEL, no=TRAINING_LEVEL_NUMBER, icon="🌳")
else:
    if _existing_level.no != TRAINING_LEVEL_NUMBER:
        # loguru cannot renumber a level once it exists.
        warnings.warn(
            f"TRAINING level already registered as {_existing_level.no}, expected {TRAINING_LEVEL_NUMBER}",
            stacklevel=2,
        )


class LoggingHandle:
    """Owns one handler added by `enable_logging`; removing it is idempotent.

    Examples:
        >>> with enable_logging(level="DEBUG"):  # doctest: +SKIP
        ...     classifier = train(dataset)
    """

    def __init__(self, handler_id: int, level: LogLevel) -> None:
        self.handler_id: int | None = handler_id
        self.level = level

    @property
    def active(self) -> bool:
        return self.handler_id is not None

    def disable(self) -> None:
        """Remove the handler; the package logger goes quiet once no handler is left."""
        if self.handler_id is None:
            return
        _open_handler_ids.discard(self.handler_id)
        with contextlib.suppress(ValueError):
            logger.remove(self.handler_id)
        self.handler_id = None
        if not _open_handler_ids:
            logger.disable(PACKAGE_NAME)

    def __enter__(self) -> LoggingHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.disable()


def enable_logging(*, level: LogLevel = TRAINING_LEVEL, stream: TextIO | None = None) -> LoggingHandle:
    """Enable id3tree logging on a text stream.

    loguru's default stderr handler is removed on the first call, so id3tree
    records are not printed twice.

    Args:
        level (LogLevel): Minimum log level to display. Defaults to "TRAINING",
            which reports when training starts and finishes. Use "DEBUG" to see
            every split and leaf the tree builder creates.
        stream (TextIO | None): Destination for formatted records; defaults to
            `sys.stderr` at call time.

    Returns:
        LoggingHandle: Handle for removing the handler again.
    """
    with contextlib.suppress(ValueError):
        logger.remove(0)
    logger.enable(PACKAGE_NAME)

    handler_id = logger.add(
        stream or sys.stderr,
        level=level,
        filter=_is_id3tree_record,
        format=_RECORD_FORMAT,
    )
    _open_handler_ids.add(handler_id)
    return LoggingHandle(handler_id, level)


def _is_id3tree_record(record: Record) -> bool:
    name = record["name"]
    return name is not None and name.startswith(PACKAGE_NAME)
