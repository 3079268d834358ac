"""
Process-wide logger registry.

Lets application code log from anywhere without passing a Logger around:

    >>> from http_logger import initialize_logger, info
    >>> initialize_logger(level="debug", file=True, file_path="./logs/app.log")
    >>> info("Fetching users")

The registry is an ordinary object, so tests (or an application with unusual
needs) can install their own Logger with ``set_logger()`` or use a separate
``LoggerRegistry`` instance altogether.
"""

from typing import Any, Mapping, Optional, Union

from .config import LoggerOptions
from .entry import LogInput
from .logger import Logger


class LoggerRegistry:
    """
    Holder for zero or one Logger.

    Re-initializing replaces the previous instance outright; options are
    never merged. A replaced Logger is left open because middleware or other
    code may still hold a reference to it.
    """

    def __init__(self):
        self._logger: Optional[Logger] = None

    def initialize(
        self,
        options: Union[LoggerOptions, Mapping[str, Any], None] = None,
        **kwargs: Any
    ) -> Logger:
        """
        Build a Logger from ``options`` and install it.

        Returns:
            The new Logger instance
        """
        self._logger = Logger(options, **kwargs)
        return self._logger

    def get(self) -> Logger:
        """Return the installed Logger, creating a default one if needed."""
        if self._logger is None:
            self._logger = Logger()
        return self._logger

    def set(self, logger: Logger) -> Logger:
        """Install an existing Logger instance."""
        self._logger = logger
        return logger

    def reset(self) -> None:
        """Forget the installed Logger; the next get() builds a default one."""
        self._logger = None

    @property
    def is_initialized(self) -> bool:
        return self._logger is not None


# Global registry instance (singleton pattern)
_default_registry = LoggerRegistry()


def get_registry() -> LoggerRegistry:
    """Return the process-wide registry."""
    return _default_registry


def initialize_logger(
    options: Union[LoggerOptions, Mapping[str, Any], None] = None,
    **kwargs: Any
) -> Logger:
    """
    Configure the global logger.

    Replaces any existing global logger with a new one built from
    ``options``.

    Example:
        >>> logger = initialize_logger(
        ...     level="debug",
        ...     format="[{timestamp}] {level} - {message}"
        ... )
        >>> logger.debug("Logger configured")
    """
    return _default_registry.initialize(options, **kwargs)


def get_logger() -> Logger:
    """
    Get global logger instance.

    Creates a logger with default options if none has been initialized.

    Example:
        >>> get_logger().info("Hello")
    """
    return _default_registry.get()


def set_logger(logger: Logger) -> Logger:
    """Install ``logger`` as the global logger."""
    return _default_registry.set(logger)


def reset_logger() -> None:
    """Drop the global logger."""
    _default_registry.reset()


def debug(input: LogInput = None, **fields: Any) -> None:
    """Log a debug entry on the global logger."""
    get_logger().debug(input, **fields)


def info(input: LogInput = None, **fields: Any) -> None:
    """Log an info entry on the global logger."""
    get_logger().info(input, **fields)


def warn(input: LogInput = None, **fields: Any) -> None:
    """Log a warning entry on the global logger."""
    get_logger().warn(input, **fields)


def error(input: LogInput = None, **fields: Any) -> None:
    """Log an error entry on the global logger."""
    get_logger().error(input, **fields)
