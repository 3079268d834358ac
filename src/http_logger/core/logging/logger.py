"""
Main logger for HTTP Logger.

Ties together level filtering, entry normalization, template formatting and
sink dispatch. Nothing here ever raises to the caller: logging must not be
able to break the request path it observes.
"""

import logging
from typing import Any, List, Mapping, Union

from .config import LoggerOptions, LogLevel
from .entry import LogEntry, LogInput, create_entry
from .filters import LevelFilter
from .formatters import get_formatter
from .handlers import Sink, create_console_sink, create_file_sink, diagnostics


class Logger:
    """
    Request/event logger.

    Features:
    - Level filtering before any work is done
    - String or partial-record input
    - Template formatting, colored on terminals
    - Console and append-only file sinks, attempted independently

    Example:
        >>> logger = Logger(LoggerOptions.create(level="debug"))
        >>> logger.info("Server started")
        >>> logger.warn({"method": "CUSTOM", "path": "/jobs", "message": "Queue is filling up"})
        >>> logger.error("Payment failed", status_code=502)
    """

    def __init__(
        self,
        options: Union[LoggerOptions, Mapping[str, Any], None] = None,
        name: str = "http_logger",
        **kwargs: Any
    ):
        """
        Initialize logger.

        Args:
            options: LoggerOptions, a dict of options, or None for defaults
            name: Logger name
            **kwargs: Individual option overrides (level="debug", file=True, ...)

        Example:
            >>> logger = Logger()  # Uses defaults
            >>> logger = Logger(level="debug", file=True, file_path="./logs/app.log")
        """
        self.options = LoggerOptions.coerce(options, **kwargs)
        self.name = name
        self._closed = False
        self._level_filter = LevelFilter(self.options.level)

        # Private, unregistered stdlib logger: instances never share sinks
        self._logger = logging.Logger(name)
        self._logger.propagate = False

        if self.options.console:
            console = create_console_sink(get_formatter(self.options.format, self.options.include_ip))
            if self._use_color(console):
                console.setFormatter(get_formatter(self.options.format, self.options.include_ip, color=True))
            self._logger.addHandler(console)

        if self.options.file:
            self._logger.addHandler(
                create_file_sink(
                    file_path=self.options.file_path,
                    formatter=get_formatter(self.options.format, self.options.include_ip)
                )
            )

        if not self._logger.handlers:
            # keeps stdlib from falling back to its stderr last-resort handler
            self._logger.addHandler(logging.NullHandler())

    def _use_color(self, console) -> bool:
        if self.options.color is None:
            return console.isatty()
        return self.options.color

    @property
    def level(self) -> LogLevel:
        """Minimum severity emitted by this logger."""
        return self._level_filter.threshold

    @property
    def sinks(self) -> List[Sink]:
        """Enabled sinks, console first."""
        return [h for h in self._logger.handlers if isinstance(h, Sink)]

    def is_enabled_for(self, level: Union[LogLevel, str]) -> bool:
        return self._level_filter.allows(level)

    def log(self, level: Union[LogLevel, str], input: LogInput = None, **fields: Any) -> None:
        """
        Log an entry at ``level``.

        Args:
            level: Severity of the call
            input: Message string, partial record (dict or LogEntry) or None
            **fields: Entry fields (method, path, status_code, duration, message, ip)

        Example:
            >>> logger.log("info", "Cache warmed", duration=120)
        """
        if self._closed or not self._level_filter.allows(level):
            return

        try:
            entry = create_entry(level, input, **fields)
            self._dispatch(entry)
        except Exception as exc:
            diagnostics.error("Failed to emit log entry: %s", exc)

    def _dispatch(self, entry: LogEntry) -> None:
        record = self._logger.makeRecord(
            self.name,
            entry.level.logging_level,
            fn="",
            lno=0,
            msg=entry.message,
            args=(),
            exc_info=None,
            extra={"entry": entry},
        )
        # handle() skips the stdlib level check; the level filter already ran
        self._logger.handle(record)

    # Shortcuts

    def debug(self, input: LogInput = None, **fields: Any) -> None:
        """
        Log debug message.

        Example:
            >>> logger.debug("Processing data")
        """
        self.log(LogLevel.DEBUG, input, **fields)

    def info(self, input: LogInput = None, **fields: Any) -> None:
        """
        Log info message.

        Example:
            >>> logger.info({"method": "CUSTOM", "path": "/import", "duration": 150})
        """
        self.log(LogLevel.INFO, input, **fields)

    def warn(self, input: LogInput = None, **fields: Any) -> None:
        """
        Log warning message.

        Example:
            >>> logger.warn("Slow response", duration=5000)
        """
        self.log(LogLevel.WARN, input, **fields)

    warning = warn

    def error(self, input: LogInput = None, **fields: Any) -> None:
        """
        Log error message.

        Example:
            >>> logger.error("Request failed", status_code=500)
        """
        self.log(LogLevel.ERROR, input, **fields)

    def close(self) -> None:
        """
        Flush and release all sinks.

        Idempotent; calling log methods afterwards is a no-op.

        Example:
            >>> with Logger(file=True, file_path="./logs/app.log") as logger:
            ...     logger.info("Processing...")
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            try:
                handler.flush()
                handler.close()
            except Exception as exc:
                diagnostics.warning("Failed to close %s: %s", handler, exc)
            self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close logger on context exit."""
        self.close()
        return False

    def __repr__(self) -> str:
        sinks = ", ".join(s.sink_name for s in self.sinks) or "none"
        return f"<Logger {self.name!r} level={self.level.value} sinks={sinks}>"
