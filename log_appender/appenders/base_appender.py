"""
Base appender

An appender subscribes to the record streams of any number of loggers,
runs every record through its formatter and outputs the result. Failures
on that path are contained in the appender.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar
import sys
import threading

from log_appender.core.log_record import LogRecord
from log_appender.core.record_stream import Subscription
from log_appender.formatters.base_formatter import Formatter
from log_appender.appenders.errors import AppenderError, FormattingError, OutputError

T = TypeVar("T")

ErrorHandler = Callable[[AppenderError], None]


class Appender(ABC, Generic[T]):
    """
    Abstract base class for appenders.

    An appender can be attached to multiple loggers but uses a single
    formatter. Subclasses implement ``append``.

    Thread Safety:
        attach_logger and stop are serialized by a lock; records may be
        delivered from any thread.

    Example:
        appender = InMemoryListAppender(BASIC_LOG_FORMATTER)
        appender.attach_logger(logger)
        logger.info("hello")
        appender.stop()
    """

    def __init__(self, formatter: Formatter[T], error_handler: Optional[ErrorHandler] = None):
        """
        Initialize appender.

        Args:
            formatter: Formatter shared by reference, never owned
            error_handler: Optional callback receiving each suppressed
                FormattingError or OutputError
        """
        self._formatter = formatter
        self._error_handler = error_handler
        self._subscriptions: List[Subscription] = []
        self._lock = threading.RLock()
        self._metrics = {"appended": 0, "dropped": 0}

    @property
    def formatter(self) -> Formatter[T]:
        return self._formatter

    @property
    def subscription_count(self) -> int:
        """Number of active logger attachments."""
        with self._lock:
            return len(self._subscriptions)

    def attach_logger(self, logger) -> Subscription:
        """
        Start receiving records from a logger.

        Attaching the same logger twice creates a second, independent
        subscription.

        Args:
            logger: Object exposing an ``on_record`` RecordStream

        Returns:
            The new subscription handle
        """
        with self._lock:
            subscription = logger.on_record.listen(self._on_record)
            self._subscriptions.append(subscription)
        return subscription

    @abstractmethod
    def append(self, record: LogRecord, formatter: Formatter[T]) -> None:
        """
        Format a record and perform the sink-specific output.

        Args:
            record: Record delivered by an attached logger
            formatter: Formatter to apply, normally ``self.formatter``
        """
        pass

    def stop(self) -> None:
        """Cancel all logger subscriptions. Safe to call repeatedly."""
        with self._lock:
            subscriptions, self._subscriptions = self._subscriptions, []
            for subscription in subscriptions:
                subscription.cancel()

    def format_record(self, record: LogRecord, formatter: Formatter[T]) -> T:
        """
        Apply a formatter to a record.

        Raises:
            FormattingError: If the formatter raises
        """
        try:
            return formatter(record)
        except Exception as e:
            raise FormattingError(record, e) from e

    def get_metrics(self) -> dict:
        """Get appended/dropped record counts."""
        with self._lock:
            return self._metrics.copy()

    def _process(self, record: LogRecord) -> Optional[AppenderError]:
        """Run append, returning the failure instead of raising it."""
        try:
            self.append(record, self._formatter)
        except AppenderError as e:
            return e
        except Exception as e:
            error = OutputError(record, e)
            error.__cause__ = e
            return error
        return None

    def _on_record(self, record: LogRecord) -> None:
        error = self._process(record)

        with self._lock:
            self._metrics["dropped" if error is not None else "appended"] += 1

        if error is not None and self._error_handler is not None:
            try:
                self._error_handler(error)
            except Exception as e:
                print(f"Appender error handler failed: {e}", file=sys.stderr)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{type(self).__name__}(formatter={self._formatter!r}, "
            f"subscriptions={self.subscription_count})"
        )
