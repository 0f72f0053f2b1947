"""
Logging configuration for the application.

One stdout handler on the root logger. The application's own loggers
follow the configured level; chatty server and client libraries are
held at WARNING so request noise does not drown domain events.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "httpx", "slowapi")


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO") -> int:
    """Configure logging for the application.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The numeric level applied to the root logger.
    """
    numeric_level = resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.captureWarnings(True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return numeric_level
