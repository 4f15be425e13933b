"""Centralized logging for freqctl.

Logging must be configured before use. Library code that may run without a
configured logger (the accessor and the CPU entity) goes through
``Logger.debug_if_configured`` instead.

Usage:
    from freqctl.utils.logger import Logger

    # Configure once at startup
    Logger.configure(level="DEBUG", output="stderr")

    # Get a logger anywhere in the codebase
    log = Logger.get("cpu")
    log.debug("cpu0 scaling_max_freq=3400000")
"""

import logging
import sys
from enum import Enum
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for freqctl.

    Must be configured once before use. Attempting to get a logger before
    configuration raises LoggerNotConfiguredError.

    Example:
        >>> Logger.configure(level="INFO", output="stderr")
        >>> Logger.get("cli").info("Setting governor on 8 cores")
    """

    _configured: bool = False
    _root_name: str = "freqctl"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "WARNING",
        output: str | TextIO = "stderr",
    ) -> None:
        """Configure the logger. Must be called before any logging.

        Args:
            level: Log level name or a LogLevel value.
            output: Where to send logs:
                - "stderr": sys.stderr (default, keeps stdout for command output)
                - TextIO: Any file-like object
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output == "stderr":
            new_handler = logging.StreamHandler(sys.stderr)
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        new_handler.setFormatter(
            logging.Formatter("%(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "freqctl."). If None, returns the root.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured

    @classmethod
    def debug_if_configured(cls, name: str, message: str) -> None:
        """Log a debug message, or do nothing if logging is not configured."""
        if cls._configured:
            cls.get(name).debug(message)
