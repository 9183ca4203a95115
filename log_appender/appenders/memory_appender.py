"""In-memory list appender"""

from typing import Any, List, Optional

from log_appender.core.log_record import LogRecord
from log_appender.formatters.base_formatter import Formatter
from log_appender.appenders.base_appender import Appender, ErrorHandler


class InMemoryListAppender(Appender[Any]):
    """
    Collect formatted records in the ``messages`` list.

    The list is never truncated, so only use this appender for
    diagnostics, tests or short-lived processes.
    """

    def __init__(self, formatter: Formatter[Any], error_handler: Optional[ErrorHandler] = None):
        super().__init__(formatter, error_handler)
        self.messages: List[Any] = []

    def append(self, record: LogRecord, formatter: Formatter[Any]) -> None:
        message = self.format_record(record, formatter)
        with self._lock:
            self.messages.append(message)

    def clear(self) -> None:
        """Discard collected messages."""
        with self._lock:
            self.messages.clear()
