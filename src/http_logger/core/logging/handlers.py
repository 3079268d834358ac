"""
Log sinks for console and file output.

A sink is a ``logging.Handler`` with one capability, ``write(line)``. The
handler machinery formats the record, calls ``write`` and routes any failure
to the diagnostic channel, so one broken sink never stops the others.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..exceptions import SinkWriteError

DIAGNOSTICS_LOGGER_NAME = "http_logger.diagnostics"


class DiagnosticHandler(logging.StreamHandler):
    """
    Handler for the library's own malfunctions.

    Always writes to the *current* ``sys.stderr``, so redirected or captured
    stderr streams are honoured.
    """

    def __init__(self, level: int = logging.WARNING):
        logging.Handler.__init__(self, level)
        self.setFormatter(logging.Formatter("[http_logger] %(levelname)s: %(message)s"))

    @property
    def stream(self) -> TextIO:
        return sys.stderr


def _setup_diagnostics() -> logging.Logger:
    logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    if not any(isinstance(h, DiagnosticHandler) for h in logger.handlers):
        logger.addHandler(DiagnosticHandler())
    logger.propagate = False
    return logger


diagnostics = _setup_diagnostics()


def ensure_log_directory(file_path: str) -> bool:
    """
    Create the parent directory of ``file_path`` (recursively) if missing.

    Returns:
        True if the directory exists afterwards; failures are reported to
        the diagnostic channel instead of raised.
    """
    log_dir = Path(file_path).parent
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        diagnostics.error("Failed to initialize log directory %s: %s", log_dir, exc)
        return False
    return True


class Sink(logging.Handler):
    """
    Base class for all sinks.

    Subclasses implement ``write(line)`` and raise SinkWriteError when the
    underlying destination fails.
    """

    sink_name = "sink"

    def write(self, line: str) -> None:
        raise NotImplementedError

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            self.write(line)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        """Report a failed write on the diagnostic channel; never raises."""
        error = sys.exc_info()[1]
        diagnostics.error("Failed to write to %s sink: %s", self.sink_name, error)


class ConsoleSink(Sink):
    """
    Console sink.

    Writes each line to ``stream``, or to the current ``sys.stdout`` when no
    stream was given.
    """

    sink_name = "console"

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str) -> None:
        stream = self.stream
        try:
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(str(exc), sink=self.sink_name, line=line) from exc

    def isatty(self) -> bool:
        """Return True if the target stream is an interactive terminal."""
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except (OSError, ValueError):
            return False


class FileSink(Sink):
    """
    Append-only file sink.

    Each line is appended with a single ``os.write`` on an ``O_APPEND``
    descriptor, so concurrent writers never interleave within a line.
    The parent directory is created once, when the sink is built.
    """

    sink_name = "file"

    def __init__(self, file_path: str):
        super().__init__()
        self.file_path = str(file_path)
        ensure_log_directory(self.file_path)

    def write(self, line: str) -> None:
        data = (line + "\n").encode("utf-8")
        try:
            fd = os.open(self.file_path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
            try:
                os.write(fd, data)
            finally:
                os.close(fd)
        except OSError as exc:
            raise SinkWriteError(
                f"Failed to write to log file {self.file_path}: {exc}",
                sink=self.sink_name,
                line=line,
            ) from exc


def _apply(sink: Sink, formatter: logging.Formatter, filters: Optional[List[logging.Filter]]) -> Sink:
    sink.setFormatter(formatter)
    if filters:
        for f in filters:
            sink.addFilter(f)
    return sink


def create_console_sink(
    formatter: logging.Formatter,
    stream: Optional[TextIO] = None,
    filters: Optional[List[logging.Filter]] = None
) -> ConsoleSink:
    """
    Create console (stdout) sink.

    Args:
        formatter: Formatter instance
        stream: Target stream (default: current sys.stdout)
        filters: List of filters to add

    Example:
        >>> from .formatters import ColoredFormatter
        >>> sink = create_console_sink(ColoredFormatter())
    """
    return _apply(ConsoleSink(stream), formatter, filters)


def create_file_sink(
    file_path: str,
    formatter: logging.Formatter,
    filters: Optional[List[logging.Filter]] = None
) -> FileSink:
    """
    Create append-only file sink.

    Creates the parent directory if it doesn't exist. No rotation: the file
    grows until something outside the process rotates it.

    Args:
        file_path: Path to log file
        formatter: Formatter instance
        filters: List of filters to add

    Example:
        >>> from .formatters import TemplateFormatter
        >>> sink = create_file_sink("./logs/app.log", TemplateFormatter())
    """
    return _apply(FileSink(file_path), formatter, filters)
