#!/usr/bin/env python3
"""Basic usage example"""

from log_appender import (
    BASIC_LOG_FORMATTER,
    InMemoryListAppender,
    LoggerBuilder,
    PrintAppender,
)
from log_appender.formatters import JSONFormatter

def main():
    console = PrintAppender(BASIC_LOG_FORMATTER)
    memory = InMemoryListAppender(JSONFormatter())

    # Create logger with builder pattern; both appenders are attached
    logger = (LoggerBuilder()
        .with_name("example")
        .with_stack_traces()
        .with_appender(console)
        .with_appender(memory)
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started")
    logger.warn("This is warning")

    try:
        1 / 0
    except ZeroDivisionError as e:
        logger.error("Division failed", error=e)

    print(f"Collected {len(memory.messages)} JSON records")

    # Detach
    console.stop()
    memory.stop()

if __name__ == "__main__":
    main()
