"""
Logging engine for HTTP Logger.

Level filtering, entry normalization, template formatting and sink dispatch.

Example:
    >>> from http_logger.core.logging import Logger, LoggerOptions
    >>>
    >>> # Quick start with defaults
    >>> logger = Logger()
    >>> logger.info("Hello, World!")
    >>>
    >>> # Configure logging
    >>> options = LoggerOptions.create(
    ...     level="debug",
    ...     file=True,
    ...     file_path="./logs/app.log"
    ... )
    >>> logger = Logger(options)
    >>> logger.info({"method": "CUSTOM", "path": "/jobs", "message": "Job queued"})
"""

from .config import LoggerOptions, LogLevel, DEFAULT_FORMAT, DEFAULT_IP_HEADERS
from .entry import LogEntry, create_entry
from .filters import LevelFilter, should_log
from .formatters import TemplateFormatter, ColoredFormatter, format_entry, get_formatter
from .handlers import (
    Sink,
    ConsoleSink,
    FileSink,
    DiagnosticHandler,
    create_console_sink,
    create_file_sink,
)
from .logger import Logger
from .registry import (
    LoggerRegistry,
    get_registry,
    initialize_logger,
    get_logger,
    set_logger,
    reset_logger,
    debug,
    info,
    warn,
    error,
)

__all__ = [
    # Config
    "LoggerOptions",
    "LogLevel",
    "DEFAULT_FORMAT",
    "DEFAULT_IP_HEADERS",
    # Entry
    "LogEntry",
    "create_entry",
    # Filters
    "LevelFilter",
    "should_log",
    # Formatters
    "TemplateFormatter",
    "ColoredFormatter",
    "format_entry",
    "get_formatter",
    # Sinks
    "Sink",
    "ConsoleSink",
    "FileSink",
    "DiagnosticHandler",
    "create_console_sink",
    "create_file_sink",
    # Logger
    "Logger",
    # Registry
    "LoggerRegistry",
    "get_registry",
    "initialize_logger",
    "get_logger",
    "set_logger",
    "reset_logger",
    "debug",
    "info",
    "warn",
    "error",
]
