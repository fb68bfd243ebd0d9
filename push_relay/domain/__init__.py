"""Domain models, validation and URI rules for the relay flow."""

from .errors import (
    DomainVerificationDisabledError,
    InvalidIpError,
    InvalidMethodError,
    InvalidPortError,
    MethodNotAllowedError,
    MissingIpError,
    RelayError,
    RelayValidationError,
)
from .models import RelayParameters, RelayTarget
from .target_uri import domain_build_target_uri
from .validation import (
    domain_apply_parameter_defaults,
    domain_is_valid_ip,
    domain_is_valid_method,
    domain_is_valid_port,
    domain_validate_relay_parameters,
)

__all__ = [
    "DomainVerificationDisabledError",
    "InvalidIpError",
    "InvalidMethodError",
    "InvalidPortError",
    "MethodNotAllowedError",
    "MissingIpError",
    "RelayError",
    "RelayParameters",
    "RelayTarget",
    "RelayValidationError",
    "domain_apply_parameter_defaults",
    "domain_build_target_uri",
    "domain_is_valid_ip",
    "domain_is_valid_method",
    "domain_is_valid_port",
    "domain_validate_relay_parameters",
]
