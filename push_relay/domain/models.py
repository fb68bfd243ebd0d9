"""Typed domain models shared across runtime layers.

This module provides request-scoped data contracts for the relay flow. None of
these values outlive one invocation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RelayParameters:
    """Raw relay parameters as received in the inbound query string.

    Empty strings are treated as absent by the validator.

    Attributes:
        ip: Target IPv4 address.
        port: Target TCP port.
        scheme: URI scheme.
        method: Outbound HTTP method.
        path: URI path.
    """

    ip: str | None = None
    port: str | None = None
    scheme: str | None = None
    method: str | None = None
    path: str | None = None


@dataclass(frozen=True)
class RelayTarget:
    """Validated destination for one relay invocation.

    Attributes:
        scheme: URI scheme, echoed verbatim into the target URI.
        host: Validated IPv4 address string, kept verbatim.
        port: Validated all-digit port string, kept verbatim.
        path: URI path, never validated.
        method: Outbound HTTP method, `GET` or `POST`.
    """

    scheme: str
    host: str
    port: str
    path: str
    method: str

    @property
    def port_number(self) -> int:
        """Return the integer value of the port string."""

        return int(self.port)
