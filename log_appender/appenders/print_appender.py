"""Console appender"""

import sys
from typing import Optional, TextIO

from log_appender.core.log_record import LogRecord
from log_appender.formatters.base_formatter import Formatter
from log_appender.appenders.base_appender import Appender, ErrorHandler


class PrintAppender(Appender[str]):
    """Write formatted records to the console, one per line."""

    def __init__(
        self,
        formatter: Formatter[str],
        stream: Optional[TextIO] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """
        Initialize print appender.

        Args:
            formatter: Text formatter
            stream: Output stream (default: sys.stdout at write time)
            error_handler: Optional observer of suppressed failures
        """
        super().__init__(formatter, error_handler)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def append(self, record: LogRecord, formatter: Formatter[str]) -> None:
        message = self.format_record(record, formatter)
        print(message, file=self.stream, flush=True)
