"""
Log record data structure

One immutable snapshot per logging call, shared read-only by every
appender subscribed to the emitting logger.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
import itertools
import threading

from log_appender.core.log_level import LogLevel

_sequence = itertools.count()
_sequence_lock = threading.Lock()


def next_sequence_number() -> int:
    """Return the next process-wide record sequence number."""
    with _sequence_lock:
        return next(_sequence)


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable log record.

    Attributes:
        level: Severity of the record
        message: Log message text
        logger_name: Name of the logger that created the record
        time: Creation timestamp
        sequence_number: Monotonically increasing across the process
        error: Optional error value attached to the call
        stack_trace: Optional stack trace text
    """

    level: LogLevel
    message: str
    logger_name: str = ""
    time: datetime = field(default_factory=datetime.now)
    sequence_number: int = field(default_factory=next_sequence_number)
    error: Optional[Any] = None
    stack_trace: Optional[str] = None

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "time": self.time.isoformat(),
            "level": self.level.name,
            "sequence_number": self.sequence_number,
            "logger_name": self.logger_name,
            "message": self.message,
            "error": None if self.error is None else str(self.error),
            "stack_trace": self.stack_trace,
        }
