"""
Structured logging for the dag-analytics CLI.

JSON lines in production, coloured console output otherwise. Logs go to
stderr because stdout carries command results.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from dag_analytics.config.settings import Settings, get_settings


def _log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level)


def setup_logging() -> None:
    """Configure structlog and the root logger from application settings.

    ``debug=True`` forces DEBUG regardless of ``log_level``.
    """
    settings = get_settings()
    level = _log_level(settings)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_production:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, named after the calling module by convention."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind key/value pairs (e.g. graph_file) to all subsequent log events."""
    structlog.contextvars.bind_contextvars(**kwargs)
