from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from userlookup.config import get_settings

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_configured = False


def resolve_level(level: int | str | None = None) -> int:
    """Map a level name or number to a stdlib level; `None` reads LOG_LEVEL."""

    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
        )
    )
    return handler


def configure_logging(level: int | str | None = None) -> None:
    """Route structlog and stdlib records through one JSON handler on stdout.

    Only the first call has an effect.
    """

    global _configured
    if _configured:
        return

    threshold = resolve_level(level)
    structlog.configure(
        processors=[*_shared_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = _json_handler()
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(threshold)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.propagate = False
        server_logger.setLevel(threshold)

    _configured = True
