# src/http_logger/middleware/adapter.py
"""
HTTP instrumentation adapter.

Turns a request lifecycle into Logger calls so route handlers never log
requests by hand. Framework bindings (see ``asgi.py``) call three hooks:

    start()            request received: start the clock, resolve the client IP
    response_started() response headers dispatched: remember the status
    complete()         response finalized: emit the request line
    fail()             handler raised: emit an error line

Exactly one line is emitted per request. Whichever of complete()/fail()
runs first marks the request as logged and the other becomes a no-op.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Union

from ..core.logging.config import LoggerOptions, LogLevel
from ..core.logging.logger import Logger
from ..core.logging.registry import initialize_logger
from ..utils.network import HeadersLike, resolve_client_ip

# Measured request durations must stay distinguishable from unmeasured (0) ones
MIN_REQUEST_DURATION = 0.01


class RequestPhase(str, Enum):
    """Lifecycle of a single request."""
    STARTED = "started"
    COMPLETED = "completed"
    ERRORED = "errored"


@dataclass
class RequestState:
    """Per-request bookkeeping kept between hooks."""

    method: str
    path: str
    ip: str = ""
    started_at: float = field(default_factory=time.perf_counter)
    status_code: Optional[int] = None
    phase: RequestPhase = RequestPhase.STARTED
    logged: bool = False

    def elapsed_ms(self) -> float:
        """Milliseconds since start, rounded to 2 decimals, never negative."""
        return max(round((time.perf_counter() - self.started_at) * 1000, 2), 0.0)


def error_message(error: Any) -> str:
    """
    Extract a printable message from anything a handler may raise.

    Prefers a ``message`` attribute, then ``str(error)``, then the type name.
    """
    try:
        message = getattr(error, "message", None)
        if message is not None and not callable(message):
            return str(message)
        text = str(error)
    except Exception:
        text = ""
    return text or type(error).__name__


class RequestLogAdapter:
    """
    Bridge between a request lifecycle and a Logger.

    Args:
        options: Logger/middleware options (LoggerOptions, dict or None)
        logger: Logger to use; overrides ``use_global`` and private creation
        **kwargs: Individual option overrides

    With ``use_global=True`` the adapter configures the global registry with
    its options and logs through the global instance, so application logs
    and request logs share one configuration. Otherwise it builds a private
    Logger and leaves the global one alone.

    Example:
        >>> adapter = RequestLogAdapter(skip=["/health"], include_ip=True)
        >>> state = adapter.start("GET", "/users", {"x-forwarded-for": "192.0.2.1"})
        >>> adapter.response_started(state, 200)
        >>> adapter.complete(state)
        True
    """

    def __init__(
        self,
        options: Union[LoggerOptions, Mapping[str, Any], None] = None,
        logger: Optional[Logger] = None,
        **kwargs: Any
    ):
        self.options = LoggerOptions.coerce(options, **kwargs)
        if logger is not None:
            self.logger = logger
        elif self.options.use_global:
            self.logger = initialize_logger(self.options)
        else:
            self.logger = Logger(self.options)
        self._skip = frozenset(self.options.skip)

    def is_skipped(self, path: str) -> bool:
        return path in self._skip

    def start(
        self,
        method: str,
        path: str,
        headers: HeadersLike = None,
        client: Optional[str] = None,
    ) -> RequestState:
        """
        Begin tracking a request.

        Args:
            method: HTTP method
            path: URL path (no query string)
            headers: Request headers, used for client IP resolution
            client: Socket peer address, used when no IP header matches
        """
        return RequestState(
            method=(method or "").upper(),
            path=path or "/",
            ip=resolve_client_ip(headers, self.options.ip_headers, fallback=client),
        )

    def response_started(self, state: RequestState, status_code: int) -> None:
        """Record the status sent with the response headers. Does not log."""
        state.status_code = status_code

    def complete(self, state: RequestState, status_code: Optional[int] = None) -> bool:
        """
        Emit the request line once the response is finalized.

        Status < 400 logs at info, anything else at warn. Skip-listed paths
        are silently marked as done. The duration never drops below
        MIN_REQUEST_DURATION, so a very fast request still renders a number.

        Returns:
            True if a line was emitted
        """
        if state.logged:
            return False
        state.logged = True
        state.phase = RequestPhase.COMPLETED

        if self.is_skipped(state.path):
            return False

        if status_code is None:
            status_code = state.status_code if state.status_code is not None else 200
        state.status_code = status_code

        level = LogLevel.INFO if status_code < 400 else LogLevel.WARN
        self.logger.log(
            level,
            method=state.method,
            path=state.path,
            status_code=status_code,
            duration=state.elapsed_ms() or MIN_REQUEST_DURATION,
            ip=state.ip,
            message=f"{state.method} {state.path}",
            http=True,
        )
        return True

    def fail(self, state: RequestState, error: Any, status_code: Optional[int] = None) -> bool:
        """
        Emit an error line for a request whose handler raised.

        Runs regardless of the skip list. The error itself is left untouched;
        re-raising it is the caller's job.

        Returns:
            True if a line was emitted
        """
        if state.logged:
            return False
        state.logged = True
        state.phase = RequestPhase.ERRORED

        if status_code is None:
            status_code = state.status_code if state.status_code is not None else 500
        state.status_code = status_code

        self.logger.log(
            LogLevel.ERROR,
            method=state.method,
            path=state.path,
            status_code=status_code,
            duration=state.elapsed_ms() or MIN_REQUEST_DURATION,
            ip=state.ip,
            message=error_message(error),
            http=True,
        )
        return True
