"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from push_relay.adapters import HttpxRelayForwarder
from push_relay.api import create_api_application
from push_relay.config import AppSettings, config_load_settings


def bootstrap_create_forwarder(settings: AppSettings) -> HttpxRelayForwarder:
    """Build the relay forwarder from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        HttpxRelayForwarder: Forwarder configured with timeout and body policy.
    """

    return HttpxRelayForwarder(
        request_timeout_seconds=settings.relay_request_timeout_seconds,
        forward_body=settings.relay_forward_body,
        raise_for_status=settings.relay_raise_for_status,
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional preloaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        forwarder=bootstrap_create_forwarder(resolved_settings),
    )
