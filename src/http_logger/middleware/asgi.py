# src/http_logger/middleware/asgi.py
"""
Request logging middleware for Starlette / FastAPI (any ASGI app).

How it works
------------
1. On each HTTP request the middleware starts a RequestState (clock + client IP).
2. It wraps ``send``:
   - ``http.response.start`` records the status code (dispatch phase);
   - after the final ``http.response.body`` has been sent the request line
     is emitted (terminal phase). Reading the status only here means the
     logged status is the one the client actually received.
3. If the app raises, or the request task is cancelled, an error line is
   emitted and the exception is re-raised unchanged for the framework's own
   error handling.

Usage
-----
    app = Starlette(routes=routes)
    app.add_middleware(LoggingMiddleware, skip=["/health"], include_ip=True)

    # or wrap any ASGI app
    app = logger({"level": "debug"})(app)

Route handlers can reach the Logger through ``request.state.logger``.
"""

from typing import Any, Callable, Mapping, Optional, Union

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ..core.logging.config import LoggerOptions
from ..core.logging.logger import Logger
from .adapter import RequestLogAdapter

STATE_KEY = "logger"


class LoggingMiddleware:
    """
    Pure ASGI middleware logging one line per HTTP request.

    Args:
        app: Wrapped ASGI application
        options: LoggerOptions, a dict of options, or None
        logger: Existing Logger to use instead of building one
        **kwargs: Individual option overrides (skip=[...], level="debug", ...)
    """

    def __init__(
        self,
        app: ASGIApp,
        options: Union[LoggerOptions, Mapping[str, Any], None] = None,
        logger: Optional[Logger] = None,
        **kwargs: Any
    ) -> None:
        self.app = app
        self.adapter = RequestLogAdapter(options, logger=logger, **kwargs)

    @property
    def logger(self) -> Logger:
        return self.adapter.logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        client = scope.get("client")
        state = self.adapter.start(
            method=scope.get("method", ""),
            path=scope.get("path", "/"),
            headers=Headers(raw=scope.get("headers") or []),
            client=client[0] if client else None,
        )
        scope.setdefault("state", {})[STATE_KEY] = self.adapter.logger

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                self.adapter.response_started(state, message["status"])

            await send(message)

            if message["type"] == "http.response.body" and not message.get("more_body", False):
                self.adapter.complete(state)

        try:
            await self.app(scope, receive, send_wrapper)
        except BaseException as exc:
            # Includes cancellation (client gone, server shutdown)
            self.adapter.fail(state, exc)
            raise

        # Stream abandoned after the headers went out (e.g. client disconnect)
        if not state.logged and state.status_code is not None:
            self.adapter.complete(state)


def logger(
    options: Union[LoggerOptions, Mapping[str, Any], None] = None,
    **kwargs: Any
) -> Callable[[ASGIApp], LoggingMiddleware]:
    """
    Build a request-logging middleware factory.

    The Logger is created once, here; every app wrapped by the returned
    factory shares it.

    Example:
        >>> app = logger(skip=["/health"], include_ip=True)(app)
    """
    adapter = RequestLogAdapter(options, **kwargs)

    def factory(app: ASGIApp) -> LoggingMiddleware:
        return LoggingMiddleware(app, options=adapter.options, logger=adapter.logger)

    return factory
