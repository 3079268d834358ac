# src/http_logger/utils/network.py
"""
Client address helpers.

Behind proxies and CDNs the socket peer is the proxy, not the client; the
original address travels in headers such as ``X-Forwarded-For``.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

RawHeaders = Iterable[Tuple[bytes, bytes]]
HeadersLike = Union[Mapping[str, Any], RawHeaders, None]


def _decode(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


def normalize_headers(headers: HeadersLike) -> Dict[str, str]:
    """
    Build a lower-cased ``{name: value}`` dict.

    Accepts a mapping (dict, Starlette ``Headers``) or raw ASGI header pairs
    ``[(b"x-real-ip", b"1.2.3.4"), ...]``. For repeated headers the first
    occurrence wins.

    Example:
        >>> normalize_headers([(b"X-Real-IP", b"198.51.100.25")])
        {'x-real-ip': '198.51.100.25'}
    """
    if not headers:
        return {}

    if isinstance(headers, Mapping):
        pairs = headers.items()
    else:
        pairs = headers

    result: Dict[str, str] = {}
    for name, value in pairs:
        result.setdefault(_decode(name).lower(), _decode(value))
    return result


def first_forwarded_address(value: str) -> str:
    """
    Return the left-most address of a comma-separated proxy chain.

    Example:
        >>> first_forwarded_address("192.0.2.100, 10.0.0.1, 172.16.0.1")
        '192.0.2.100'
    """
    return value.split(",", 1)[0].strip()


def resolve_client_ip(
    headers: HeadersLike,
    ip_headers: Sequence[str],
    fallback: Optional[str] = "",
) -> str:
    """
    Resolve the client IP from request headers.

    Headers are checked in ``ip_headers`` order; the first one with a
    non-empty value wins. Forwarded chains yield their first (client)
    address. Without a match the socket peer ``fallback`` is returned.

    Args:
        headers: Request headers (mapping or raw ASGI pairs)
        ip_headers: Header names in priority order (case-insensitive)
        fallback: Address to use when no header matches

    Example:
        >>> resolve_client_ip(
        ...     {"cf-connecting-ip": "203.0.113.50", "x-forwarded-for": "10.0.0.1"},
        ...     ["cf-connecting-ip", "x-forwarded-for"]
        ... )
        '203.0.113.50'
    """
    normalized = normalize_headers(headers)

    for name in ip_headers:
        value = normalized.get(name.lower(), "")
        if value.strip():
            address = first_forwarded_address(value)
            if address:
                return address

    return fallback or ""
