"""Centralised structlog configuration."""
import logging
import sys
from typing import Optional

import structlog

from venue_compliance.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog (and the stdlib root logger) from LOG_LEVEL / LOG_FORMAT."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
