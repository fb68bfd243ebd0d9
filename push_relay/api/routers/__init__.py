"""API router package for endpoint composition."""

from .health import api_create_health_router
from .relay import api_create_relay_router, api_relay_method_not_allowed_handler

__all__ = [
    "api_create_health_router",
    "api_create_relay_router",
    "api_relay_method_not_allowed_handler",
]
