"""Adapter layer package for outbound relay boundaries."""

from .interfaces import (
	ForwardHttpError,
	ForwardResult,
	ForwardSuccess,
	ForwardTransportError,
	RelayForwarderPort,
)
from .relay_forwarder import HttpxRelayForwarder
from .transport_error_codes import TransportErrorCode, transport_error_code_for

__all__ = [
	"ForwardHttpError",
	"ForwardResult",
	"ForwardSuccess",
	"ForwardTransportError",
	"HttpxRelayForwarder",
	"RelayForwarderPort",
	"TransportErrorCode",
	"transport_error_code_for",
]
