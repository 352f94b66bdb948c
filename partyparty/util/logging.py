"""Logging configuration for the application."""

import logging
import sys

from partyparty.config import Settings

LOG_FORMAT = "%(asctime)s partyparty-api %(levelname)s [%(name)s] %(message)s"

# Request lines duplicate the FastAPI spans sent through logfire
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for libraries that do not log via logfire.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Record store and identity calls are only worth reading when debugging
    quiet_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger("partyparty").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s, record_store=%s",
        settings.environment,
        logging.getLevelName(level),
        settings.record_store.base_url,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
