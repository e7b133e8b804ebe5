"""
Structured Logging

structlog on top of stdlib logging. Configured once, on first import.

Renderers:
==========
APP_ENV=development → coloured key=value lines
    2026-01-15T10:30:00Z [info     ] Share link created    user_id=660e8400-...
anything else       → one JSON object per line
    {"event": "Share link created", "user_id": "660e8400-...", "request_id": "9f1c...", "level": "info", ...}

Request context:
================
RequestContextMiddleware binds request_id / method / path, and the auth
gate adds user_id. Everything logged while that request runs carries those
keys. Context lives in contextvars, so concurrent requests never mix.

Never log passwords, password digests or tokens.

Usage:
======
    from brain.shared.core.logging import logger, log_context

    log_context(user_id=str(user_id))
    logger.info("Content created", content_id=str(content.id))
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from brain.config.settings import Settings, settings


def setup_logging(config: Settings) -> None:
    """Route structlog through stdlib logging at config.LOG_LEVEL."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Named structlog logger, e.g. get_logger("brain.db")."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind keys to every log line emitted by the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all request-bound keys."""
    structlog.contextvars.clear_contextvars()


setup_logging(settings)

logger = get_logger("brain")
