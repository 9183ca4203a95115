"""
Logger - named source of log records

Appenders never see the logger itself, only its record stream.
"""

from __future__ import annotations
from typing import Any, Optional
import threading
import traceback

from log_appender.core.log_level import LogLevel
from log_appender.core.log_record import LogRecord
from log_appender.core.logger_config import LoggerConfig
from log_appender.core.record_stream import RecordStream


class Logger:
    """Named logger publishing LogRecords on ``on_record``."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._stream = RecordStream()
        self._metrics_lock = threading.Lock()
        self._metrics = {"logged": 0}

    @property
    def name(self) -> str:
        """Logger name."""
        return self._config.name

    @property
    def on_record(self) -> RecordStream:
        """Stream of records created by this logger."""
        return self._stream

    def log(
        self,
        level: LogLevel,
        message: str,
        error: Optional[Any] = None,
        stack_trace: Optional[str] = None,
    ) -> LogRecord:
        """
        Create a record and emit it to every listener.

        Args:
            level: Record severity
            message: Log message
            error: Optional error value
            stack_trace: Optional stack trace text

        Returns:
            The emitted record
        """
        if (
            stack_trace is None
            and self._config.capture_stack_trace
            and isinstance(error, BaseException)
            and error.__traceback__ is not None
        ):
            stack_trace = "".join(traceback.format_tb(error.__traceback__)).rstrip()

        record = LogRecord(
            level=level,
            message=message,
            logger_name=self._config.name,
            error=error,
            stack_trace=stack_trace,
        )
        self._stream.emit(record)

        with self._metrics_lock:
            self._metrics["logged"] += 1
        return record

    def trace(self, message: str, **kwargs) -> LogRecord:
        """Log trace message."""
        return self.log(LogLevel.TRACE, message, **kwargs)

    def debug(self, message: str, **kwargs) -> LogRecord:
        """Log debug message."""
        return self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> LogRecord:
        """Log info message."""
        return self.log(LogLevel.INFO, message, **kwargs)

    def warn(self, message: str, **kwargs) -> LogRecord:
        """Log warning message."""
        return self.log(LogLevel.WARN, message, **kwargs)

    def error(self, message: str, **kwargs) -> LogRecord:
        """Log error message."""
        return self.log(LogLevel.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs) -> LogRecord:
        """Log critical message."""
        return self.log(LogLevel.CRITICAL, message, **kwargs)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self.name!r}, listeners={self._stream.listener_count})"
