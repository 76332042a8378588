"""Logging setup for the uploader and its command line entry point."""

from __future__ import annotations

import logging
import sys

import structlog

from .config import Settings, get_settings


def configure_logging(
    level: str | None = None,
    *,
    settings: Settings | None = None,
) -> None:
    """Emit JSON log events on stderr at the configured level.

    stdout stays free for the payloads a dry run prints.
    """
    resolved_settings = settings or get_settings()
    numeric_level = logging.getLevelName((level or resolved_settings.log_level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    # httpx and rdflib log through the standard library.
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s", level=numeric_level)
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
