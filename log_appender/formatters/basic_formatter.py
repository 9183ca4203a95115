"""
Basic fixed-pattern text formatter
"""

from datetime import datetime

from log_appender.core.log_record import LogRecord
from log_appender.formatters.base_formatter import Formatter


def format_timestamp(time: datetime, fraction_digits: int = 1) -> str:
    """
    Render a timestamp as ``yyMMdd HH:mm:ss.S``.

    Args:
        time: Timestamp to render
        fraction_digits: Sub-second digits to keep (1-6), truncated

    Returns:
        e.g. ``230102 03:04:05.6``
    """
    if not 1 <= fraction_digits <= 6:
        raise ValueError("fraction_digits must be between 1 and 6")

    fraction = f"{time.microsecond:06d}"[:fraction_digits]
    return f"{time:%y%m%d %H:%M:%S}.{fraction}"


class BasicLogFormatter(Formatter[str]):
    """
    Format log records using a simple pattern:

        yyMMdd HH:mm:ss.S level sequence loggerName message

    followed by ``, error: <error>`` and/or ``, stackTrace: <trace>`` when
    the record carries them. Use the shared ``BASIC_LOG_FORMATTER``.
    """

    def format(self, record: LogRecord) -> str:
        message = (
            f"{format_timestamp(record.time)} "
            f"{record.level} "
            f"{record.sequence_number} "
            f"{record.logger_name} "
            f"{record.message}"
        )
        if record.error is not None:
            message = f"{message}, error: {record.error}"
        if record.stack_trace is not None:
            message = f"{message}, stackTrace: {record.stack_trace}"
        return message

    def __repr__(self) -> str:
        """String representation."""
        return "BasicLogFormatter()"


# Default instance of the BasicLogFormatter
BASIC_LOG_FORMATTER = BasicLogFormatter()
