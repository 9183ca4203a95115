"""Appenders module - Log output sinks"""

from log_appender.appenders.errors import AppenderError, FormattingError, OutputError
from log_appender.appenders.base_appender import Appender, ErrorHandler
from log_appender.appenders.print_appender import PrintAppender
from log_appender.appenders.memory_appender import InMemoryListAppender

__all__ = [
    "Appender",
    "ErrorHandler",
    "PrintAppender",
    "InMemoryListAppender",
    "AppenderError",
    "FormattingError",
    "OutputError",
]
