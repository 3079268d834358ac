"""Core HTTP Logger modules."""

from .logging import Logger, LoggerOptions, LogLevel, LogEntry
from .exceptions import (
    HTTPLoggerException,
    SinkWriteError,
    ConfigurationError,
    ConfigValidationError,
)

__all__ = [
    "Logger",
    "LoggerOptions",
    "LogLevel",
    "LogEntry",
    "HTTPLoggerException",
    "SinkWriteError",
    "ConfigurationError",
    "ConfigValidationError",
]
