"""
Log entry model and input normalization.

Every log call, whether a bare string from application code or a partial
record from the HTTP middleware, is turned into a fully populated LogEntry
before it is formatted.
"""

import math
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Union

from .config import LogLevel

DEFAULT_METHOD = "LOG"
DEFAULT_PATH = "-"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogEntry:
    """
    Canonical record produced for every log call.

    Attributes:
        timestamp: When the entry was created (timezone-aware, UTC)
        level: Severity
        method: HTTP verb or a synthetic tag such as "LOG" or "CUSTOM"
        path: URL path or log context, "-" when not applicable
        status_code: HTTP status, 0 for non-HTTP entries
        duration: Elapsed milliseconds, 0 when not measured
        message: Free text
        ip: Client address, if known
        http: Set by the HTTP middleware; changes column padding
    """

    timestamp: datetime = field(default_factory=_utcnow)
    level: LogLevel = LogLevel.INFO
    method: str = DEFAULT_METHOD
    path: str = DEFAULT_PATH
    status_code: int = 0
    duration: float = 0
    message: str = ""
    ip: Optional[str] = None
    http: bool = False


LogInput = Union[str, Mapping[str, Any], LogEntry, None]

_ENTRY_FIELDS = {f.name for f in fields(LogEntry)}


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _timestamp(value: Any) -> datetime:
    if not isinstance(value, datetime):
        return _utcnow()
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _collect(input: LogInput, extra: Mapping[str, Any]) -> Dict[str, Any]:
    if isinstance(input, LogEntry):
        data = {name: getattr(input, name) for name in _ENTRY_FIELDS}
    elif isinstance(input, Mapping):
        data = dict(input)
    elif input is None:
        data = {}
    else:
        # plain message; non-string objects (exceptions etc.) are rendered with str()
        data = {"message": input}

    data.update(extra)
    if "statusCode" in data and "status_code" not in data:
        data["status_code"] = data.pop("statusCode")
    return data


def create_entry(level: Union[LogLevel, str], input: LogInput = None, **extra: Any) -> LogEntry:
    """
    Normalize a log call's input into a LogEntry.

    Args:
        level: Severity of the call; an explicit ``level`` in the input wins
        input: Message string, partial record (dict or LogEntry) or None
        **extra: Extra fields merged over ``input``

    Returns:
        A LogEntry with every field populated

    Never raises: values of the wrong type fall back to the field default.

    Example:
        >>> entry = create_entry("info", "Server started")
        >>> entry.method, entry.path, entry.message
        ('LOG', '-', 'Server started')
        >>> create_entry("info", {"method": "custom", "status_code": 201}).status_code
        201
    """
    call_level = LogLevel.parse(level)
    data = _collect(input, extra)

    message = data.get("message")
    if message is None:
        message = ""
    elif not isinstance(message, str):
        message = str(message)

    status_code = data.get("status_code")
    if _is_number(status_code) and math.isfinite(status_code):
        status_code = int(status_code)
    else:
        status_code = 0

    duration = data.get("duration")
    duration = float(duration) if _is_number(duration) else 0.0
    if not math.isfinite(duration) or duration < 0:
        duration = 0.0
    if duration.is_integer():
        duration = int(duration)

    ip = data.get("ip")
    ip = ip if isinstance(ip, str) and ip else None

    return LogEntry(
        timestamp=_timestamp(data.get("timestamp")),
        level=LogLevel.parse(data.get("level"), default=call_level),
        method=_text(data.get("method"), DEFAULT_METHOD),
        path=_text(data.get("path"), DEFAULT_PATH),
        status_code=status_code,
        duration=duration,
        message=message,
        ip=ip,
        http=bool(data.get("http", False)),
    )
