"""Utility modules for HTTP Logger."""

from .network import (
    normalize_headers,
    first_forwarded_address,
    resolve_client_ip,
)

__all__ = [
    "normalize_headers",
    "first_forwarded_address",
    "resolve_client_ip",
]
