"""
Appender error types

These errors never leave an appender: they are the values its failure
boundary produces, counts as dropped and hands to an optional error
handler.
"""

from typing import Optional

from log_appender.core.log_record import LogRecord


class AppenderError(Exception):
    """Base class for per-record appender failures."""

    def __init__(self, record: LogRecord, cause: Optional[BaseException] = None):
        self.record = record
        self.cause = cause
        detail = f": {cause!r}" if cause is not None else ""
        super().__init__(
            f"{type(self).__name__} for record #{record.sequence_number}{detail}"
        )


class FormattingError(AppenderError):
    """The formatter failed to convert the record."""


class OutputError(AppenderError):
    """The sink-specific output action failed."""
