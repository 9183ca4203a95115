"""
Core module for log appender system

This module contains the record source side:
- Logger: Named logger exposing a record stream
- LoggerBuilder: Builder pattern for logger construction and appender wiring
- LogRecord: Immutable log record
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- RecordStream / Subscription: Broadcast stream and its cancellable handles
"""

from log_appender.core.logger import Logger
from log_appender.core.logger_builder import LoggerBuilder
from log_appender.core.log_record import LogRecord
from log_appender.core.log_level import LogLevel
from log_appender.core.logger_config import LoggerConfig
from log_appender.core.record_stream import RecordStream, Subscription

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "LoggerConfig",
    "RecordStream",
    "Subscription",
]
