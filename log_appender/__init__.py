"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Log Appender - Formatter/appender layer that distributes log records
from named loggers to output sinks
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_appender.core.logger import Logger
from log_appender.core.logger_builder import LoggerBuilder
from log_appender.core.log_record import LogRecord
from log_appender.core.log_level import LogLevel
from log_appender.core.logger_config import LoggerConfig
from log_appender.formatters import BASIC_LOG_FORMATTER, BasicLogFormatter, Formatter
from log_appender.appenders import Appender, InMemoryListAppender, PrintAppender

# Import submodules (not all classes by default)
from log_appender import appenders
from log_appender import formatters

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "LoggerConfig",
    "Formatter",
    "BasicLogFormatter",
    "BASIC_LOG_FORMATTER",
    "Appender",
    "PrintAppender",
    "InMemoryListAppender",
    "appenders",
    "formatters",
]
