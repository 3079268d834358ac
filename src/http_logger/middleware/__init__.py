"""HTTP request logging middleware."""

from .adapter import RequestLogAdapter, RequestState, RequestPhase, error_message
from .asgi import LoggingMiddleware, logger

__all__ = [
    "RequestLogAdapter",
    "RequestState",
    "RequestPhase",
    "error_message",
    "LoggingMiddleware",
    "logger",
]
