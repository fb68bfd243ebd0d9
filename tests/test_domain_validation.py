"""Regression tests for relay parameter defaults and validation rules."""

from __future__ import annotations

import pytest

from push_relay.domain import (
    InvalidIpError,
    InvalidMethodError,
    InvalidPortError,
    MissingIpError,
    RelayParameters,
    domain_apply_parameter_defaults,
    domain_is_valid_ip,
    domain_is_valid_method,
    domain_is_valid_port,
    domain_validate_relay_parameters,
)


@pytest.mark.parametrize(
    "ip",
    ["192.168.1.1", "10.0.0.1", "255.255.255.255", "1.0.0.1", "1.01.001.1", "  172.16.4.9  ", "8.8.8.8\n"],
)
def test_domain_is_valid_ip_accepts_supported_addresses(ip: str) -> None:
    """Accept addresses matching the octet rules, including lax middle octets.

    Args:
        ip: Candidate address.

    Returns:
        None: Assertions validate acceptance.

    Raises:
        AssertionError: Raised when a supported address is rejected.
    """

    assert domain_is_valid_ip(ip) is True


@pytest.mark.parametrize(
    "ip",
    [
        "256.1.1.1",
        "1.1.1.256",
        "1.256.1.1",
        "01.1.1.1",
        "1.1.1.01",
        "0.1.1.1",
        "1.1.1.0",
        "1.1.1",
        "1.1.1.1.1",
        "a.b.c.d",
        "1.1.1.1:80",
        "",
        "١.1.1.1",
    ],
)
def test_domain_is_valid_ip_rejects_unsupported_addresses(ip: str) -> None:
    """Reject out-of-range, malformed and leading-zero edge octets.

    Args:
        ip: Candidate address.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when an unsupported address is accepted.
    """

    assert domain_is_valid_ip(ip) is False


def test_domain_is_valid_ip_rejects_none() -> None:
    """Treat a missing address as invalid."""

    assert domain_is_valid_ip(None) is False


def test_domain_is_valid_port_follows_digit_and_nonzero_rules() -> None:
    """Accept nonzero digit strings without an upper bound.

    Returns:
        None: Assertions validate port rules.

    Raises:
        AssertionError: Raised when port acceptance differs.
    """

    assert domain_is_valid_port("443") is True
    assert domain_is_valid_port("007") is True
    assert domain_is_valid_port("99999") is True
    assert domain_is_valid_port("0") is False
    assert domain_is_valid_port("000") is False
    assert domain_is_valid_port("abc") is False
    assert domain_is_valid_port("-1") is False
    assert domain_is_valid_port("80.5") is False
    assert domain_is_valid_port("80\n") is False
    assert domain_is_valid_port("") is False
    assert domain_is_valid_port(None) is False


def test_domain_is_valid_method_allows_only_get_and_post() -> None:
    """Allow exactly the uppercase GET and POST verbs."""

    assert domain_is_valid_method("GET") is True
    assert domain_is_valid_method("POST") is True
    assert domain_is_valid_method("PUT") is False
    assert domain_is_valid_method("get") is False


def test_domain_apply_parameter_defaults_fills_absent_values() -> None:
    """Resolve https scheme, root path, GET method and port 443 by default.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    resolved = domain_apply_parameter_defaults(RelayParameters(ip="10.0.0.1", path="", method=""))

    assert resolved == RelayParameters(ip="10.0.0.1", port="443", scheme="https", method="GET", path="/")


def test_domain_apply_parameter_defaults_uses_port_80_for_non_https_scheme() -> None:
    """Fall back to port 80 whenever scheme is not exactly `https`."""

    assert domain_apply_parameter_defaults(RelayParameters(scheme="http")).port == "80"
    assert domain_apply_parameter_defaults(RelayParameters(scheme="HTTPS")).port == "80"
    assert domain_apply_parameter_defaults(RelayParameters(scheme="ftp")).port == "80"


def test_domain_apply_parameter_defaults_uppercases_method() -> None:
    """Uppercase supplied methods before validation."""

    assert domain_apply_parameter_defaults(RelayParameters(method="post")).method == "POST"


def test_domain_validate_relay_parameters_builds_target() -> None:
    """Return a target carrying verbatim scheme, path and port strings.

    Returns:
        None: Assertions validate target values.

    Raises:
        AssertionError: Raised when target values differ.
    """

    target = domain_validate_relay_parameters(
        RelayParameters(ip="10.0.0.1", port="007", scheme="gopher", method="post", path="//x")
    )

    assert target.host == "10.0.0.1"
    assert target.port == "007"
    assert target.port_number == 7
    assert target.scheme == "gopher"
    assert target.method == "POST"
    assert target.path == "//x"


def test_domain_validate_relay_parameters_reports_missing_ip() -> None:
    """Raise the missing-ip error with its fixed message."""

    with pytest.raises(MissingIpError, match="Mandatory query parameter ip is missing"):
        domain_validate_relay_parameters(RelayParameters(ip=""))


def test_domain_validate_relay_parameters_reports_invalid_ip_before_port() -> None:
    """Stop at the first failing check when ip and port are both invalid.

    Returns:
        None: Assertions validate short-circuit order.

    Raises:
        AssertionError: Raised when the wrong error is reported.
    """

    with pytest.raises(InvalidIpError) as error_info:
        domain_validate_relay_parameters(RelayParameters(ip="300.1.1.1", port="abc", method="PUT"))

    assert error_info.value.message == "IP address specified (300.1.1.1) is invalid"


def test_domain_validate_relay_parameters_reports_invalid_port_before_method() -> None:
    """Report the port failure when both port and method are invalid."""

    with pytest.raises(InvalidPortError) as error_info:
        domain_validate_relay_parameters(RelayParameters(ip="10.0.0.1", port="0", method="PUT"))

    assert error_info.value.message == "TCP port specified (0) is invalid."


def test_domain_validate_relay_parameters_reports_invalid_method() -> None:
    """Report the uppercased method in the method failure message."""

    with pytest.raises(InvalidMethodError) as error_info:
        domain_validate_relay_parameters(RelayParameters(ip="10.0.0.1", method="delete"))

    assert error_info.value.message == (
        "HTTP method specified (DELETE) is invalid. Only HTTP GET and POST are allowed."
    )
    assert error_info.value.status_code == 400


def test_domain_is_valid_port_accepts_digit_runs_beyond_integer_parse_limits() -> None:
    """Accept very long nonzero digit runs and reject very long zero runs.

    Returns:
        None: Assertions validate unbounded port handling.

    Raises:
        AssertionError: Raised when long digit runs are misclassified.
    """

    assert domain_is_valid_port("1" + "0" * 5000) is True
    assert domain_is_valid_port("0" * 5000 + "7") is True
    assert domain_is_valid_port("0" * 5000) is False


def test_domain_is_valid_ip_rejects_octets_beyond_integer_parse_limits() -> None:
    """Reject very long octets without failing on integer conversion.

    Returns:
        None: Assertions validate long octet handling.

    Raises:
        AssertionError: Raised when long octets are accepted.
    """

    assert domain_is_valid_ip("1." + "0" * 5000 + "1.1.1") is True
    assert domain_is_valid_ip("1." + "9" * 5000 + ".1.1") is False
    assert domain_is_valid_ip("1" + "0" * 5000 + ".1.1.1") is False
    assert domain_is_valid_ip("1.0256.1.1") is False
    assert domain_is_valid_ip("1.0000255.1.1") is True


def test_domain_validate_relay_parameters_keeps_long_port_verbatim() -> None:
    """Build a target for a very long port instead of raising."""

    long_port = "9" * 5000

    target = domain_validate_relay_parameters(RelayParameters(ip="10.0.0.1", port=long_port))

    assert target.port == long_port
