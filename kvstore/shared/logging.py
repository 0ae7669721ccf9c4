"""
Logging configuration for the key-value service.

One format for every logger, written to stdout.
Logging must not change program behavior.
Stored values and request bodies are never logged; keys may be.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn logs every request line; the pipeline already logs rejections
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def resolve_level(level: str | int) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Unknown names fall back to INFO rather than failing startup.
    """
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(level: str | int = "INFO") -> None:
    """Configure process-wide logging for the service.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR) or number.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
