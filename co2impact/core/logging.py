"""
Logging Setup - CO2 Impact Dashboard
co2impact/core/logging.py

structlog configuration driven by Settings.LOG_LEVEL / LOG_FORMAT.
"""

import logging
from typing import Optional

import structlog

from co2impact.config import Settings, get_settings

_configured = False


def configure_logging(settings: Optional[Settings] = None, *, force: bool = False) -> None:
    """Configure structlog once per process (Streamlit reruns call this repeatedly)."""
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _configured = True
