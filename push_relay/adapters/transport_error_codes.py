"""Canonical transport failure codes for relay forwarding outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Final

import httpx


class TransportErrorCode(str, Enum):
    """Stable codes reported when a target never produced a response."""

    CONNECT_TIMEOUT = "CONNECT_TIMEOUT"
    READ_TIMEOUT = "READ_TIMEOUT"
    WRITE_TIMEOUT = "WRITE_TIMEOUT"
    POOL_TIMEOUT = "POOL_TIMEOUT"
    TIMEOUT = "TIMEOUT"
    CONNECTION_FAILED = "CONNECTION_FAILED"
    READ_FAILED = "READ_FAILED"
    WRITE_FAILED = "WRITE_FAILED"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    PROXY_ERROR = "PROXY_ERROR"
    UNSUPPORTED_PROTOCOL = "UNSUPPORTED_PROTOCOL"
    INVALID_URL = "INVALID_URL"
    TOO_MANY_REDIRECTS = "TOO_MANY_REDIRECTS"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


# Ordered from most to least specific; first isinstance match wins.
_HTTPX_ERROR_CODES: Final[tuple[tuple[type[Exception], TransportErrorCode], ...]] = (
    (httpx.ConnectTimeout, TransportErrorCode.CONNECT_TIMEOUT),
    (httpx.ReadTimeout, TransportErrorCode.READ_TIMEOUT),
    (httpx.WriteTimeout, TransportErrorCode.WRITE_TIMEOUT),
    (httpx.PoolTimeout, TransportErrorCode.POOL_TIMEOUT),
    (httpx.TimeoutException, TransportErrorCode.TIMEOUT),
    (httpx.ConnectError, TransportErrorCode.CONNECTION_FAILED),
    (httpx.ReadError, TransportErrorCode.READ_FAILED),
    (httpx.WriteError, TransportErrorCode.WRITE_FAILED),
    (httpx.ProtocolError, TransportErrorCode.PROTOCOL_ERROR),
    (httpx.ProxyError, TransportErrorCode.PROXY_ERROR),
    (httpx.UnsupportedProtocol, TransportErrorCode.UNSUPPORTED_PROTOCOL),
    (httpx.InvalidURL, TransportErrorCode.INVALID_URL),
    (httpx.TooManyRedirects, TransportErrorCode.TOO_MANY_REDIRECTS),
)


def transport_error_code_for(error: Exception) -> str:
    """Return the stable transport code for an httpx failure.

    Args:
        error: Exception raised by the HTTP client.

    Returns:
        str: Matching code, or `TRANSPORT_ERROR` for unclassified failures.
    """

    for error_type, error_code in _HTTPX_ERROR_CODES:
        if isinstance(error, error_type):
            return error_code.value
    return TransportErrorCode.TRANSPORT_ERROR.value


def transport_error_message_for(error: Exception) -> str:
    """Return a non-empty message for an httpx failure.

    httpx timeouts are frequently raised with an empty message.
    """

    message = str(error).strip()
    if message:
        return message
    return f"{type(error).__name__} while contacting target"
