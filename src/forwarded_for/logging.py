"""Structured logging configuration.

Loggers are backed by the standard library, so nothing below WARNING is
emitted until the host application configures logging (either through
configure_logging or its own logging setup).
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from forwarded_for.config import ForwardedConfig


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every log entry with the library name."""
    event_dict["app"] = "forwarded-for"
    return event_dict


def _build_processors(development: bool) -> list[Processor]:
    """Processor chain ending in a console (development) or JSON renderer."""
    renderer: Processor = (
        structlog.dev.ConsoleRenderer(colors=True)
        if development
        else structlog.processors.JSONRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(config: ForwardedConfig | None = None, level: int | None = None) -> None:
    """Configure structured logging for a host application.

    Args:
        config: Settings to read the environment from (loaded from env when None)
        level: Log level override (DEBUG in development, INFO otherwise)
    """
    config = config or ForwardedConfig()
    development = config.env == "development"

    if level is None:
        level = logging.DEBUG if development else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # Module-level loggers must pick up later reconfiguration, so no caching
    structlog.configure(
        processors=_build_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger writing through the stdlib logger of the same name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("client_address_resolved", ip="203.0.113.5")
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
