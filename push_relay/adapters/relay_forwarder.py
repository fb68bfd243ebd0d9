"""httpx-backed forwarder that relays one request to a validated target."""

from __future__ import annotations

import json
import math
from typing import Any, Final

import httpx
import structlog

from .interfaces import (
    ForwardHttpError,
    ForwardResult,
    ForwardSuccess,
    ForwardTransportError,
    RelayForwarderPort,
)
from .transport_error_codes import transport_error_code_for, transport_error_message_for

_LOGGER = structlog.get_logger(__name__)


class HttpxRelayForwarder(RelayForwarderPort):
    """Forwarder issuing exactly one outbound request per invocation.

    A fresh `httpx.AsyncClient` is opened per call so invocations never share
    connection state. No retries are attempted.
    """

    _USER_AGENT: Final[str] = "push-relay/1.0 (Python/httpx)"

    def __init__(
        self,
        request_timeout_seconds: float = 120.0,
        forward_body: bool = True,
        raise_for_status: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize relay forwarder.

        Args:
            request_timeout_seconds: Timeout applied to connect, read, write and pool phases.
            forward_body: Whether the inbound payload is sent to the target.
            raise_for_status: Whether non-2xx target statuses produce an HTTP error result.
            transport: Optional httpx transport override, used by tests.

        Raises:
            ValueError: Raised when the timeout is not positive.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._request_timeout_seconds = float(request_timeout_seconds)
        self._forward_body = forward_body
        self._raise_for_status = raise_for_status
        self._transport = transport

    def adapter_timeout_seconds(self) -> float:
        return self._request_timeout_seconds

    def adapter_forwards_body(self) -> bool:
        return self._forward_body

    async def adapter_forward(
        self,
        invocation_id: str,
        uri: str,
        method: str,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> ForwardResult:
        """Send one request to the target and map the outcome to a result.

        Args:
            invocation_id: Correlation identifier for diagnostics.
            uri: Outbound request URI.
            method: Outbound HTTP method.
            body: Optional raw inbound payload.
            content_type: Optional inbound content type sent with the payload.

        Returns:
            ForwardResult: `ForwardSuccess` for accepted responses,
            `ForwardHttpError` for non-2xx statuses when status checking is enabled,
            `ForwardTransportError` when no response was received.
        """

        log = _LOGGER.bind(invocation_id=invocation_id)
        headers = {"User-Agent": self._USER_AGENT}
        content = None
        if self._forward_body and body:
            content = body
            if content_type:
                headers["Content-Type"] = content_type

        log.info("relay_forward_started", uri=uri, method=method, body_bytes=len(content or b""))
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._request_timeout_seconds),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.request(method, uri, content=content, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as error:
            code = transport_error_code_for(error)
            message = transport_error_message_for(error)
            log.warning("relay_forward_transport_error", uri=uri, code=code, message=message)
            return ForwardTransportError(code=code, message=message)

        data = self._adapter_decode_body(response)
        if self._raise_for_status and not response.is_success:
            log.warning("relay_forward_http_error", uri=uri, status_code=response.status_code)
            return ForwardHttpError(status_code=response.status_code, data=data)

        log.info("relay_forward_succeeded", uri=uri, status_code=response.status_code)
        return ForwardSuccess(status_code=response.status_code, data=data)

    def _adapter_decode_body(self, response: httpx.Response) -> Any:
        """Decode target body as strict JSON when possible, else as text.

        Non-finite numbers (`NaN`, `Infinity`, overflowing literals) are not JSON
        and leave the body as text.

        Args:
            response: Fully read target response.

        Returns:
            Any: Parsed JSON value, decoded text, or an empty string.
        """

        if not response.content:
            return ""
        try:
            return json.loads(
                response.text,
                parse_constant=_adapter_reject_json_constant,
                parse_float=_adapter_parse_finite_float,
            )
        except ValueError:
            return response.text


def _adapter_reject_json_constant(constant: str) -> Any:
    raise ValueError(f"non-finite JSON constant: {constant}")


def _adapter_parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"non-finite JSON number: {literal}")
    return value
