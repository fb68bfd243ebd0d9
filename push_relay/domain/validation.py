"""Relay parameter defaults and validation rules.

Octets 1 and 4 of an IPv4 address must start with a nonzero digit while
octets 2 and 3 accept any digit run, and ports have no upper bound. Both
quirks are part of the observable contract of the relay and are kept as-is.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import InvalidIpError, InvalidMethodError, InvalidPortError, MissingIpError
from .models import RelayParameters, RelayTarget

HTTPS_SCHEME: Final[str] = "https"
DEFAULT_URI_SCHEME: Final[str] = "https"
DEFAULT_HTTP_METHOD: Final[str] = "GET"
DEFAULT_URI_PATH: Final[str] = "/"
DEFAULT_HTTPS_PORT: Final[str] = "443"
DEFAULT_HTTP_PORT: Final[str] = "80"
ALLOWED_HTTP_METHODS: Final[frozenset[str]] = frozenset({"GET", "POST"})

_IPV4_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*([1-9][0-9]*)\.([0-9]+)\.([0-9]+)\.([1-9][0-9]*)\s*\Z"
)
_PORT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9]+\Z")
_MAX_OCTET_VALUE: Final[int] = 255
_MAX_OCTET_DIGITS: Final[int] = 3


def _domain_octet_within_bound(octet: str) -> bool:
    # Digit runs are unbounded, so compare lengths before converting.
    significant_digits = octet.lstrip("0") or "0"
    if len(significant_digits) > _MAX_OCTET_DIGITS:
        return False
    return int(significant_digits) <= _MAX_OCTET_VALUE


def domain_is_valid_ip(ip: str | None) -> bool:
    """Return whether a value is an accepted IPv4 address.

    Surrounding whitespace is tolerated. Each octet must be <= 255.

    Args:
        ip: Candidate address string.

    Returns:
        bool: True when the address is accepted.
    """

    if ip is None:
        return False
    octets = _IPV4_PATTERN.match(ip)
    if octets is None:
        return False
    return all(_domain_octet_within_bound(octet) for octet in octets.groups())


def domain_is_valid_port(port: str | None) -> bool:
    """Return whether a value is an all-digit, nonzero TCP port.

    Args:
        port: Candidate port string.

    Returns:
        bool: True when the port is accepted.
    """

    if port is None or _PORT_PATTERN.match(port) is None:
        return False
    return port.lstrip("0") != ""


def domain_is_valid_method(method: str | None) -> bool:
    """Return whether an already-uppercased method is relayable."""

    return method in ALLOWED_HTTP_METHODS


def domain_apply_parameter_defaults(parameters: RelayParameters) -> RelayParameters:
    """Fill absent relay parameters with their defaults.

    Empty values count as absent. The port default depends on the resolved
    scheme being exactly `https`. The method is uppercased. `ip` has no
    default and stays None when absent.

    Args:
        parameters: Raw query parameters.

    Returns:
        RelayParameters: Parameters with defaults applied.
    """

    scheme = parameters.scheme or DEFAULT_URI_SCHEME
    default_port = DEFAULT_HTTPS_PORT if scheme == HTTPS_SCHEME else DEFAULT_HTTP_PORT
    return RelayParameters(
        ip=parameters.ip or None,
        port=parameters.port or default_port,
        scheme=scheme,
        method=(parameters.method or DEFAULT_HTTP_METHOD).upper(),
        path=parameters.path or DEFAULT_URI_PATH,
    )


def domain_validate_relay_parameters(parameters: RelayParameters) -> RelayTarget:
    """Apply defaults and validate relay parameters into a target.

    Checks run in order and stop at the first failure: ip presence, ip
    validity, port validity, method validity. Scheme and path are accepted
    verbatim.

    Args:
        parameters: Raw query parameters.

    Returns:
        RelayTarget: Validated relay destination.

    Raises:
        MissingIpError: Raised when `ip` is absent.
        InvalidIpError: Raised when `ip` is not an accepted IPv4 address.
        InvalidPortError: Raised when `port` is not an all-digit nonzero value.
        InvalidMethodError: Raised when `method` is neither GET nor POST.
    """

    resolved = domain_apply_parameter_defaults(parameters)

    if resolved.ip is None:
        raise MissingIpError()
    if not domain_is_valid_ip(resolved.ip):
        raise InvalidIpError(resolved.ip)
    if not domain_is_valid_port(resolved.port):
        raise InvalidPortError(str(resolved.port))
    if not domain_is_valid_method(resolved.method):
        raise InvalidMethodError(str(resolved.method))

    return RelayTarget(
        scheme=str(resolved.scheme),
        host=resolved.ip,
        port=str(resolved.port),
        path=str(resolved.path),
        method=str(resolved.method),
    )
