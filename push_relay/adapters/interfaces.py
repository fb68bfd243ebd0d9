"""Typed interfaces for adapter-layer responsibilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union


@dataclass(frozen=True)
class ForwardSuccess:
    """Target answered with an accepted status.

    Attributes:
        status_code: Target HTTP status code.
        data: Decoded target response body.
    """

    status_code: int
    data: Any


@dataclass(frozen=True)
class ForwardHttpError:
    """Target answered with a failing status.

    Attributes:
        status_code: Target HTTP status code.
        data: Decoded target response body.
    """

    status_code: int
    data: Any


@dataclass(frozen=True)
class ForwardTransportError:
    """No response was received from the target.

    Attributes:
        code: Stable transport failure code.
        message: Human-readable failure description.
    """

    code: str
    message: str


ForwardResult = Union[ForwardSuccess, ForwardHttpError, ForwardTransportError]


class RelayForwarderPort(Protocol):
    """Port definition for forwarding one relay request to its target."""

    def adapter_timeout_seconds(self) -> float:
        """Return the outbound request timeout in seconds."""

    def adapter_forwards_body(self) -> bool:
        """Return whether inbound bodies are passed to the target."""

    async def adapter_forward(
        self,
        invocation_id: str,
        uri: str,
        method: str,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> ForwardResult:
        """Send one request to the target and return its outcome.

        Args:
            invocation_id: Correlation identifier for diagnostics.
            uri: Outbound request URI.
            method: Outbound HTTP method.
            body: Optional raw inbound payload.
            content_type: Optional inbound content type sent with the payload.

        Returns:
            ForwardResult: Success, target HTTP error or transport error.
        """
