"""
Log formatters.

Renders a LogEntry into one line of text according to a template such as::

    [{timestamp}] {level} [{method}] {path} - {statusCode} {duration}ms{ip} {message}
"""

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Dict

from .config import DEFAULT_FORMAT, LogLevel
from .entry import LogEntry, create_entry

LEVEL_WIDTH = 5
HTTP_METHOD_WIDTH = 7


def _format_timestamp(entry: LogEntry) -> str:
    # 2024-01-15T10:30:45.123Z
    stamp = entry.timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def _format_method(entry: LogEntry) -> str:
    method = entry.method.upper()
    if entry.http:
        return method.ljust(HTTP_METHOD_WIDTH)
    return method


def _format_status(entry: LogEntry) -> str:
    if entry.status_code or entry.http:
        return str(entry.status_code)
    return ""


def _format_duration(entry: LogEntry) -> str:
    if not entry.duration:
        return ""
    # 12 -> "12", 12.50 -> "12.5"
    return f"{entry.duration:.2f}".rstrip("0").rstrip(".")


# Placeholder -> renderer. {ip} depends on include_ip and is handled separately.
PLACEHOLDERS: Dict[str, Callable[[LogEntry], str]] = {
    "{timestamp}": _format_timestamp,
    "{level}": lambda entry: entry.level.value.upper().ljust(LEVEL_WIDTH),
    "{method}": _format_method,
    "{path}": lambda entry: entry.path or "-",
    "{statusCode}": _format_status,
    "{duration}": _format_duration,
    "{message}": lambda entry: entry.message or "",
}

_PLACEHOLDER_PATTERN = re.compile(r"\{[A-Za-z_]+\}")


def format_entry(entry: LogEntry, template: str = DEFAULT_FORMAT, include_ip: bool = False) -> str:
    """
    Render an entry with a template.

    Every occurrence of each recognized placeholder is replaced; unknown
    placeholders are left verbatim. The result is stripped and has no line
    terminator.

    Args:
        entry: Entry to render
        template: Line template
        include_ip: Render ``{ip}`` as `` from <ip>`` when the entry has one

    Example:
        >>> entry = create_entry("warn", {"method": "GET", "path": "/x", "status_code": 404})
        >>> format_entry(entry, "{level}|{method} {path} {statusCode}")
        'WARN |GET /x 404'
    """
    values: Dict[str, str] = {}

    def substitute(match: "re.Match[str]") -> str:
        placeholder = match.group(0)
        if placeholder not in values:
            if placeholder == "{ip}":
                values[placeholder] = f" from {entry.ip}" if include_ip and entry.ip else ""
            elif placeholder in PLACEHOLDERS:
                values[placeholder] = PLACEHOLDERS[placeholder](entry)
            else:
                values[placeholder] = placeholder
        return values[placeholder]

    # single pass, so substituted values are never rescanned for placeholders
    line = _PLACEHOLDER_PATTERN.sub(substitute, template or DEFAULT_FORMAT)
    return line.strip()


_LEVELS_BY_NUMBER = {
    logging.DEBUG: LogLevel.DEBUG,
    logging.INFO: LogLevel.INFO,
    logging.WARNING: LogLevel.WARN,
    logging.ERROR: LogLevel.ERROR,
}


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """
    Build an entry for a plain stdlib record (one without an ``entry`` attribute).

    Lets TemplateFormatter be installed on ordinary logging handlers.
    """
    if record.levelno >= logging.ERROR:
        level = LogLevel.ERROR
    else:
        level = _LEVELS_BY_NUMBER.get(record.levelno, LogLevel.INFO)

    return create_entry(
        level,
        record.getMessage(),
        timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
    )


class TemplateFormatter(logging.Formatter):
    """
    Template formatter.

    Output example:
        [2024-01-15T10:30:45.123Z] INFO  [GET    ] /users - 200 12.5ms GET /users
    """

    def __init__(self, template: str = DEFAULT_FORMAT, include_ip: bool = False):
        """
        Initialize template formatter.

        Args:
            template: Line template; blank falls back to DEFAULT_FORMAT
            include_ip: Render ``{ip}`` when the entry carries an address
        """
        super().__init__()
        self.template = template or DEFAULT_FORMAT
        self.include_ip = include_ip

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single line."""
        entry = getattr(record, "entry", None)
        if not isinstance(entry, LogEntry):
            entry = entry_from_record(record)
        return self.format_entry(entry)

    def format_entry(self, entry: LogEntry) -> str:
        return format_entry(entry, self.template, self.include_ip)


class ColoredFormatter(TemplateFormatter):
    """
    Template formatter that colors the whole line by level.

    Uses ANSI color codes:
    - debug: Gray
    - info: Blue
    - warn: Yellow
    - error: Red
    """

    COLORS = {
        LogLevel.DEBUG: '\033[90m',  # Gray
        LogLevel.INFO: '\033[34m',   # Blue
        LogLevel.WARN: '\033[33m',   # Yellow
        LogLevel.ERROR: '\033[31m',  # Red
    }
    RESET = '\033[0m'

    def format_entry(self, entry: LogEntry) -> str:
        line = super().format_entry(entry)
        color = self.COLORS.get(entry.level)
        if not color:
            return line
        return f"{color}{line}{self.RESET}"


def get_formatter(template: str = DEFAULT_FORMAT, include_ip: bool = False, color: bool = False) -> TemplateFormatter:
    """
    Get a formatter for a template.

    Example:
        >>> formatter = get_formatter("{level} {message}", color=True)
        >>> isinstance(formatter, ColoredFormatter)
        True
    """
    formatter_class = ColoredFormatter if color else TemplateFormatter
    return formatter_class(template, include_ip=include_ip)
