"""Response envelope builders for relay outcomes.

Every JSON body carries the invocation id under `id`. The verification page is
the only non-JSON response and bypasses the envelope.
"""

from __future__ import annotations

import html
from typing import Any

from fastapi import status
from fastapi.responses import HTMLResponse, JSONResponse

from push_relay.adapters import ForwardHttpError, ForwardResult, ForwardSuccess, ForwardTransportError
from push_relay.domain import RelayError


def api_build_error_response(invocation_id: str, error: RelayError) -> JSONResponse:
    """Build the client error envelope for a rejected request.

    Args:
        invocation_id: Correlation identifier.
        error: Typed relay error carrying message and status code.

    Returns:
        JSONResponse: `{id, error}` body with the error's status code.
    """

    payload = {"id": invocation_id, "error": error.message}
    return JSONResponse(content=payload, status_code=error.status_code)


def api_build_forward_response(
    invocation_id: str,
    method: str,
    uri: str,
    result: ForwardResult,
) -> JSONResponse:
    """Build the envelope for a forward outcome.

    Args:
        invocation_id: Correlation identifier.
        method: Outbound HTTP method.
        uri: Outbound request URI.
        result: Forwarder outcome.

    Returns:
        JSONResponse: 200 success envelope, or 500 error envelope.

    Raises:
        TypeError: Raised when result is not a known forward outcome.
    """

    if isinstance(result, ForwardSuccess):
        payload: dict[str, Any] = {
            "id": invocation_id,
            "method": method,
            "uri": uri,
            "response": {"status": result.status_code, "data": result.data},
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    if isinstance(result, ForwardHttpError):
        payload = {
            "id": invocation_id,
            "error": {"status": result.status_code, "data": result.data},
        }
        return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(result, ForwardTransportError):
        payload = {
            "id": invocation_id,
            "error": {"code": result.code, "message": result.message},
        }
        return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    raise TypeError(f"unsupported forward result: {type(result).__name__}")


def api_build_verification_response(verification_code: str) -> HTMLResponse:
    """Build the domain-verification page for the configured code."""

    content = html.escape(verification_code, quote=True)
    page = (
        f'<html><head><meta name="google-site-verification" content="{content}" />'
        "<title></title></head><body></body></html>"
    )
    return HTMLResponse(content=page, status_code=status.HTTP_200_OK)
