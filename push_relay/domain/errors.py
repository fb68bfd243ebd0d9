"""Project-native typed exceptions for inbound relay request failures."""

from __future__ import annotations


class RelayError(Exception):
    """Base exception for client-facing relay failures.

    Attributes:
        status_code: HTTP status returned to the caller.
    """

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RelayValidationError(RelayError, ValueError):
    """Client-correctable relay parameter failure."""

    status_code = 400


class MissingIpError(RelayValidationError):
    """Mandatory `ip` query parameter was not supplied."""

    def __init__(self):
        super().__init__("Mandatory query parameter ip is missing")


class InvalidIpError(RelayValidationError):
    """Supplied `ip` is not an accepted IPv4 address."""

    def __init__(self, ip: str):
        super().__init__(f"IP address specified ({ip}) is invalid")
        self.ip = ip


class InvalidPortError(RelayValidationError):
    """Supplied `port` is not an all-digit nonzero value."""

    def __init__(self, port: str):
        super().__init__(f"TCP port specified ({port}) is invalid.")
        self.port = port


class InvalidMethodError(RelayValidationError):
    """Supplied `method` is neither GET nor POST."""

    def __init__(self, method: str):
        super().__init__(
            f"HTTP method specified ({method}) is invalid. Only HTTP GET and POST are allowed."
        )
        self.method = method


class MethodNotAllowedError(RelayError):
    """Inbound HTTP verb is not accepted by the relay endpoint."""

    status_code = 405

    def __init__(self, method: str):
        super().__init__(f"Received {method} method in HTTP request. Only POST is allowed.")
        self.method = method


class DomainVerificationDisabledError(RelayError):
    """GET request received while no verification code is configured."""

    status_code = 400

    def __init__(self):
        super().__init__(
            "HTTP GET method is allowed only for Google Domain verification purposes, "
            "and, environment variable SITE_VERIFICATION_CODE must be set."
        )
