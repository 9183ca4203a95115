"""
Logger configuration management
"""

from dataclasses import dataclass


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Attributes:
        name: Logger name stamped on every record
        capture_stack_trace: Render the traceback of an exception passed as
            ``error`` into the record's stack_trace when none is given
    """

    name: str = "logger"
    capture_stack_trace: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("name must be a non-empty string")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls, name: str = "logger") -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(name=name, capture_stack_trace=True)
