"""Structured logging configuration using structlog.

Log events are rendered as JSON (or console text for local runs) and carry the
per-invocation correlation id bound through structlog context variables.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import EventDict, Processor

SERVICE_NAME = "push-relay"


def _add_app_context(_logger: logging.Logger, _method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("app", SERVICE_NAME)
    return event_dict


def observability_configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    environment_name: str | None = None,
) -> None:
    """Configure structlog on top of standard library logging.

    Args:
        log_level: Standard logging level name.
        json_logs: Render events as JSON when true, console text otherwise.
        environment_name: Optional environment label bound to every event.

    Returns:
        None: Configures global logging state as side effect.
    """

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _add_app_context,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    if environment_name:
        structlog.contextvars.bind_contextvars(environment=environment_name)
