"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from log_appender.core.log_record import LogRecord

T = TypeVar("T")


class Formatter(ABC, Generic[T]):
    """
    Abstract base class for log formatters.

    Formatters convert LogRecord objects into a value of type T. They hold
    no mutable state, so one instance can be shared by any number of
    appenders and threads.
    """

    @abstractmethod
    def format(self, record: LogRecord) -> T:
        """
        Format a log record.

        Args:
            record: The log record to format

        Returns:
            Formatted representation of the record
        """
        pass

    def __call__(self, record: LogRecord) -> T:
        """Allow formatters to be callable."""
        return self.format(record)
