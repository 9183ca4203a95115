"""
JSON formatter for structured logging

Formats log records as JSON objects
"""

import json
from typing import Optional

from log_appender.core.log_record import LogRecord
from log_appender.formatters.base_formatter import Formatter


class JSONFormatter(Formatter[str]):
    """
    Format log records as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    Keys with a None value are left out.
    """

    def __init__(self, indent: Optional[int] = None, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self._indent = indent
        self._ensure_ascii = ensure_ascii

    @property
    def indent(self) -> Optional[int]:
        return self._indent

    @property
    def ensure_ascii(self) -> bool:
        return self._ensure_ascii

    def format(self, record: LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_dict = {k: v for k, v in record.to_dict().items() if v is not None}

        return json.dumps(
            log_dict,
            indent=self._indent,
            ensure_ascii=self._ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self._indent})"
