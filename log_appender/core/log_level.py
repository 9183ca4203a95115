"""
Log level enumeration
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    CRITICAL = 50   # Critical errors

    def __str__(self) -> str:
        """Render as the bare level name, e.g. ``INFO``."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        try:
            return cls[level_str.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid log level: {level_str}") from None
