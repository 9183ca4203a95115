"""
Log formatters module

Formatters turn a LogRecord into the value an appender outputs.
"""

from log_appender.formatters.base_formatter import Formatter
from log_appender.formatters.basic_formatter import (
    BASIC_LOG_FORMATTER,
    BasicLogFormatter,
    format_timestamp,
)
from log_appender.formatters.json_formatter import JSONFormatter

__all__ = [
    "Formatter",
    "BasicLogFormatter",
    "BASIC_LOG_FORMATTER",
    "JSONFormatter",
    "format_timestamp",
]
