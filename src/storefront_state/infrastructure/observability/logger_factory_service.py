"""structlog setup for the storefront session.

Module code logs through ``structlog.get_logger()`` or :func:`get_logger`;
library loggers (httpx, asyncio) reach the same renderer through a stdlib
``ProcessorFormatter`` handler installed by :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars

from storefront_state.infrastructure.observability.logging.storefront_processor import (
    storefront_fields_processor,
)

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})
_QUIET_LIBRARIES = ("httpx", "httpcore")

_configured = False


def configure_logging(log_level: str = "INFO", log_format: str | None = None) -> None:
    """Configures structlog and the root stdlib logger once per process.

    ``log_format`` is ``json`` or ``console``; when omitted it comes from
    ``LOG_FORMAT``, falling back to JSON for deployed ``APP_ENV`` values.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    renderer = _renderer_for(log_format or os.environ.get("LOG_FORMAT"))
    chain = _shared_processors()

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level.upper())
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Logger tagged with the emitting component (``storage``, ``catalog``...)."""
    return structlog.get_logger().bind(context_component=component)


def bind_session(session_id: str) -> None:
    bind_contextvars(session_id=session_id)


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        storefront_fields_processor,
    ]


def _renderer_for(log_format: str | None) -> Any:
    fmt = (log_format or "").lower()
    if not fmt:
        env = os.environ.get("APP_ENV", "local").lower()
        fmt = "json" if env in _JSON_ENVIRONMENTS else "console"
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
