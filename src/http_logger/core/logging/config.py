"""
Logging configuration for HTTP Logger.

Provides the severity enum and the immutable options object every Logger
instance is built from.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .handlers import diagnostics


class LogLevel(str, Enum):
    """Log levels, ordered by severity."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def ordinal(self) -> int:
        """Position in the severity order (debug=0 ... error=3)."""
        return _LEVEL_ORDER.index(self)

    @property
    def logging_level(self) -> int:
        """Matching stdlib logging level (e.g. logging.WARNING for WARN)."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, value: Any, default: Optional["LogLevel"] = None) -> "LogLevel":
        """
        Convert a level name or member into a LogLevel.

        Never raises: anything unrecognized returns ``default`` (INFO when
        not given).

        Example:
            >>> LogLevel.parse("WARNING")
            <LogLevel.WARN: 'warn'>
            >>> LogLevel.parse("verbose")
            <LogLevel.INFO: 'info'>
        """
        if default is None:
            default = cls.INFO
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return default
        name = value.strip().lower()
        return _LEVEL_ALIASES.get(name, default)


_LEVEL_ORDER = (LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR)

_LEVEL_ALIASES = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "error": LogLevel.ERROR,
}

_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


DEFAULT_FORMAT = "[{timestamp}] {level} [{method}] {path} - {statusCode} {duration}ms{ip} {message}"
DEFAULT_FILE_PATH = "./logs/app.log"
DEFAULT_IP_HEADERS = ("x-forwarded-for", "x-real-ip", "x-client-ip")

# camelCase spellings accepted by from_mapping()
_KEY_ALIASES = {
    "filePath": "file_path",
    "includeIp": "include_ip",
    "ipHeaders": "ip_headers",
    "useGlobal": "use_global",
}


def _as_tuple(value: Any, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Coerce a list, tuple or comma-separated string into a tuple of strings."""
    if value is None:
        return default
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value if isinstance(item, str) and item)
    return default


_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def _as_bool(value: Any, default: Optional[bool]) -> Optional[bool]:
    """Coerce a bool, int or boolean-like string ('false', 'off', '0', ...)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return default


@dataclass(frozen=True)
class LoggerOptions:
    """
    Configuration for a Logger and its HTTP middleware.

    Attributes:
        console: Write lines to stdout
        file: Append lines to ``file_path``
        file_path: Log file path (parent directories are created)
        level: Minimum severity emitted
        format: Line template (see formatters.PLACEHOLDERS)
        skip: Paths excluded from automatic request logging (not from error logging)
        include_ip: Render ``{ip}`` as `` from <ip>``
        ip_headers: Headers checked, in order, to resolve the client IP
        use_global: Middleware configures and uses the global logger
        color: Colorize console output; None means only on a terminal

    Example:
        >>> options = LoggerOptions.create(
        ...     level="debug",
        ...     file=True,
        ...     file_path="./logs/app.log",
        ...     skip=["/health"]
        ... )
    """

    console: bool = True
    file: bool = False
    file_path: str = DEFAULT_FILE_PATH
    level: LogLevel = LogLevel.INFO
    format: str = DEFAULT_FORMAT
    skip: Tuple[str, ...] = ()
    include_ip: bool = False
    ip_headers: Tuple[str, ...] = DEFAULT_IP_HEADERS
    use_global: bool = False
    color: Optional[bool] = None

    @classmethod
    def create(
        cls,
        console: Any = True,
        file: Any = False,
        file_path: Optional[str] = None,
        level: Union[str, LogLevel, None] = "info",
        format: Optional[str] = None,
        skip: Union[str, Iterable[str], None] = None,
        include_ip: Any = False,
        ip_headers: Union[str, Iterable[str], None] = None,
        use_global: Any = False,
        color: Any = None,
    ) -> "LoggerOptions":
        """
        Create LoggerOptions from loosely typed values.

        Invalid values fall back to defaults instead of raising: an unknown
        level becomes INFO, a blank format becomes DEFAULT_FORMAT and a
        comma-separated string is accepted wherever a list is expected. Flags
        accept booleans, integers and strings such as "true" or "off"; any
        other value keeps the flag's default.

        Example:
            >>> options = LoggerOptions.create(level="warn", skip="/health,/metrics")
            >>> options.skip
            ('/health', '/metrics')
        """
        if not isinstance(format, str) or not format.strip():
            format = DEFAULT_FORMAT
        if not isinstance(file_path, str) or not file_path:
            file_path = DEFAULT_FILE_PATH

        return cls(
            console=_as_bool(console, True),
            file=_as_bool(file, False),
            file_path=file_path,
            level=LogLevel.parse(level),
            format=format,
            skip=_as_tuple(skip, ()),
            include_ip=_as_bool(include_ip, False),
            ip_headers=tuple(h.lower() for h in _as_tuple(ip_headers, DEFAULT_IP_HEADERS)),
            use_global=_as_bool(use_global, False),
            color=_as_bool(color, None),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoggerOptions":
        """
        Create LoggerOptions from a dict.

        Accepts snake_case and camelCase keys (``filePath``, ``includeIp``,
        ``ipHeaders``, ``useGlobal``). Unknown keys are ignored.
        """
        known = {}
        for key, value in data.items():
            key = _KEY_ALIASES.get(key, key)
            if key in cls.__dataclass_fields__:
                known[key] = value
        return cls.create(**known)

    @classmethod
    def coerce(cls, value: Union["LoggerOptions", Mapping[str, Any], None] = None, **kwargs: Any) -> "LoggerOptions":
        """
        Normalize whatever a caller passed as options.

        Accepts an existing LoggerOptions (returned as is unless keyword
        overrides are given), a mapping, or None (defaults). Anything
        else is reported on diagnostics and treated as None. Keyword
        arguments override individual fields.
        """
        if isinstance(value, cls):
            if not kwargs:
                return value
            merged = {name: getattr(value, name) for name in cls.__dataclass_fields__}
            merged.update(kwargs)
            return cls.from_mapping(merged)

        if value is not None and not isinstance(value, Mapping):
            diagnostics.warning(
                "Ignoring logger options of type %s; expected LoggerOptions or a mapping",
                type(value).__name__,
            )
            value = None

        merged = dict(value or {})
        merged.update(kwargs)
        return cls.from_mapping(merged)
