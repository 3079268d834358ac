"""HTTP Logger - leveled, template-formatted logging with request middleware."""

from importlib.metadata import version, PackageNotFoundError

from .core.logging import (
    Logger,
    LoggerOptions,
    LogLevel,
    LogEntry,
    LoggerRegistry,
    create_entry,
    format_entry,
    initialize_logger,
    get_logger,
    set_logger,
    reset_logger,
    debug,
    info,
    warn,
    error,
)
from .core.exceptions import (
    HTTPLoggerException,
    SinkWriteError,
    ConfigurationError,
    ConfigValidationError,
)
from .core.env_config import load_from_env, ConfigFileLoader
from .middleware import LoggingMiddleware, RequestLogAdapter, logger

# Version info - read from package metadata (single source of truth in pyproject.toml)
try:
    __version__ = version("http-logger-core")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Logger
    "Logger",
    "LoggerOptions",
    "LogLevel",
    "LogEntry",
    "create_entry",
    "format_entry",
    # Global logger
    "LoggerRegistry",
    "initialize_logger",
    "get_logger",
    "set_logger",
    "reset_logger",
    "debug",
    "info",
    "warn",
    "error",
    # Middleware
    "LoggingMiddleware",
    "RequestLogAdapter",
    "logger",
    # Configuration
    "load_from_env",
    "ConfigFileLoader",
    # Exceptions
    "HTTPLoggerException",
    "SinkWriteError",
    "ConfigurationError",
    "ConfigValidationError",
    "__version__",
]
