"""Health endpoint router composition for runtime status checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from push_relay.adapters import RelayForwarderPort
from push_relay.config import AppSettings


def api_create_health_router(settings: AppSettings, forwarder: RelayForwarderPort) -> APIRouter:
    """Create health-check router reporting relay configuration state.

    Args:
        settings: Runtime settings.
        forwarder: Configured relay forwarder.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if forwarder is None:
        raise ValueError("forwarder must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health and relay configuration.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        payload = {
            "status": "ok",
            "app": "up",
            "environment": settings.environment_name,
            "forward_timeout_seconds": forwarder.adapter_timeout_seconds(),
            "forward_body": forwarder.adapter_forwards_body(),
            "domain_verification": settings.settings_domain_verification_enabled(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
