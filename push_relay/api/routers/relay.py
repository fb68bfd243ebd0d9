"""Relay router composition for the push-subscription entry point."""

from __future__ import annotations

from typing import Final
from uuid import uuid4

import structlog
from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from push_relay.adapters import RelayForwarderPort
from push_relay.api.envelope import (
    api_build_error_response,
    api_build_forward_response,
    api_build_verification_response,
)
from push_relay.config import AppSettings
from push_relay.domain import (
    DomainVerificationDisabledError,
    MethodNotAllowedError,
    RelayParameters,
    RelayValidationError,
    domain_build_target_uri,
    domain_validate_relay_parameters,
)

_LOGGER = structlog.get_logger(__name__)

RELAY_ROUTE_PATH: Final[str] = "/"
# Verbs outside this list reach the relay path through api_relay_method_not_allowed_handler.
RELAY_ROUTED_METHODS: Final[tuple[str, ...]] = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD")


def api_create_relay_router(settings: AppSettings, forwarder: RelayForwarderPort) -> APIRouter:
    """Create relay router that validates and forwards push requests.

    Args:
        settings: Runtime settings providing the verification code.
        forwarder: Adapter sending the outbound request.

    Returns:
        APIRouter: Router exposing the `/` relay endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if forwarder is None:
        raise ValueError("forwarder must not be None")

    router = APIRouter(tags=["relay"])

    @router.api_route(RELAY_ROUTE_PATH, methods=list(RELAY_ROUTED_METHODS))
    async def api_relay_invoke(request: Request) -> Response:
        """Validate relay parameters, forward once and return the envelope.

        Args:
            request: Inbound push request.

        Returns:
            Response: Verification page, error envelope or forward envelope.
        """

        invocation_id = str(uuid4())
        with structlog.contextvars.bound_contextvars(invocation_id=invocation_id):
            _LOGGER.info("relay_invoked", inbound_method=request.method)
            return await _api_relay_handle(invocation_id=invocation_id, request=request)

    async def _api_relay_handle(invocation_id: str, request: Request) -> Response:
        if request.method == "GET":
            if settings.site_verification_code is None:
                _LOGGER.warning("relay_domain_verification_disabled")
                return api_build_error_response(invocation_id, DomainVerificationDisabledError())
            _LOGGER.info("relay_domain_verification_served")
            return api_build_verification_response(settings.site_verification_code)

        if request.method != "POST":
            _LOGGER.warning("relay_method_not_allowed", inbound_method=request.method)
            return api_build_error_response(invocation_id, MethodNotAllowedError(request.method))

        query = request.query_params
        parameters = RelayParameters(
            ip=query.get("ip"),
            port=query.get("port"),
            scheme=query.get("scheme"),
            method=query.get("method"),
            path=query.get("path"),
        )
        try:
            target = domain_validate_relay_parameters(parameters)
        except RelayValidationError as error:
            _LOGGER.warning("relay_validation_failed", reason=type(error).__name__, detail=error.message)
            return api_build_error_response(invocation_id, error)

        uri = domain_build_target_uri(target)
        body: bytes | None = None
        if forwarder.adapter_forwards_body():
            body = await request.body()
        _LOGGER.info(
            "relay_target_resolved",
            ip=target.host,
            port=target.port,
            scheme=target.scheme,
            path=target.path,
            method=target.method,
            uri=uri,
            body_bytes=None if body is None else len(body),
        )

        result = await forwarder.adapter_forward(
            invocation_id=invocation_id,
            uri=uri,
            method=target.method,
            body=body,
            content_type=request.headers.get("content-type"),
        )
        return api_build_forward_response(invocation_id, target.method, uri, result)

    return router


async def api_relay_method_not_allowed_handler(request: Request, error: StarletteHTTPException) -> Response:
    """Answer unrouted verbs on the relay path with the 405 envelope.

    Other HTTP exceptions keep FastAPI's default rendering.

    Args:
        request: Inbound request rejected by routing.
        error: HTTP exception raised by the router.

    Returns:
        Response: 405 `{id, error}` envelope, or the default exception response.
    """

    if error.status_code != status.HTTP_405_METHOD_NOT_ALLOWED or request.url.path != RELAY_ROUTE_PATH:
        return await http_exception_handler(request, error)

    invocation_id = str(uuid4())
    with structlog.contextvars.bound_contextvars(invocation_id=invocation_id):
        _LOGGER.warning("relay_method_not_allowed", inbound_method=request.method)
        return api_build_error_response(invocation_id, MethodNotAllowedError(request.method))
