"""Logger builder pattern"""

from typing import List, TYPE_CHECKING

from log_appender.core.logger import Logger
from log_appender.core.logger_config import LoggerConfig

if TYPE_CHECKING:
    from log_appender.appenders.base_appender import Appender


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "logger"
        self._capture_stack_trace = False
        self._appenders: List["Appender"] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_stack_traces(self, enabled: bool = True) -> "LoggerBuilder":
        """Capture tracebacks of exceptions passed as ``error``."""
        self._capture_stack_trace = enabled
        return self

    def with_appender(self, appender: "Appender") -> "LoggerBuilder":
        """
        Attach an appender to the built logger.

        Args:
            appender: Appender instance

        Returns:
            Self for method chaining

        Example:
            from log_appender import BASIC_LOG_FORMATTER, PrintAppender

            logger = (LoggerBuilder()
                .with_name("app")
                .with_appender(PrintAppender(BASIC_LOG_FORMATTER))
                .build())
        """
        self._appenders.append(appender)
        return self

    def build(self) -> Logger:
        """Build the logger and attach every configured appender."""
        config = LoggerConfig(
            name=self._name,
            capture_stack_trace=self._capture_stack_trace,
        )
        logger = Logger(config)

        for appender in self._appenders:
            appender.attach_logger(logger)

        return logger
