"""structlog configuration shared by the whole service."""

import logging

import structlog

from school_locator.config import get_settings


def configure_logging(level: str) -> None:
    """Configure structlog to emit JSON lines at the given level.

    Args:
        level: Minimum log level name, e.g. "INFO". Unknown names fall back
            to INFO.
    """
    min_level = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        cache_logger_on_first_use=True,
    )


configure_logging(get_settings().log_level)
logger = structlog.get_logger()
