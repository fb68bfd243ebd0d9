"""FastAPI application factory for the relay service."""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from push_relay.adapters import RelayForwarderPort
from push_relay.config import AppSettings

from .routers import api_create_health_router, api_create_relay_router, api_relay_method_not_allowed_handler


def create_api_application(settings: AppSettings, forwarder: RelayForwarderPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        forwarder: Adapter used to send relayed requests.

    Returns:
        FastAPI: Application with health and relay routes.
    """
    application = FastAPI(title="Push Relay")

    application.include_router(api_create_health_router(settings=settings, forwarder=forwarder))
    application.include_router(api_create_relay_router(settings=settings, forwarder=forwarder))
    application.add_exception_handler(StarletteHTTPException, api_relay_method_not_allowed_handler)

    return application
