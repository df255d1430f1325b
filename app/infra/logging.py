"""structlog setup for the taxonomy service.

Log lines are JSON outside dev and coloured key=value text in dev. The
request middleware binds ``request_id``, ``method`` and ``path`` through
contextvars so every line written while serving a request carries them.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from app.config import settings

# Libraries that are chatty at INFO; SQL echo is governed by settings.debug
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.pool", "asyncpg", "aiosqlite")


def _level() -> int:
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _renderer_chain() -> list[Processor]:
    if settings.log_json and settings.environment != "dev":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging() -> None:
    """Configure structlog and send stdlib logging to stdout at the same level."""
    level = _level()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer_chain(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_request_context(**context: Any) -> None:
    """Replace the request-scoped log context with ``context``."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Return a structlog logger, optionally pre-bound with ``initial_context``."""
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
