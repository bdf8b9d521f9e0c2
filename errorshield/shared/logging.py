"""
Logging configuration for the application.

One stdout stream, one format. Raw error messages and stacks only ever
go to the diagnostics logger, never into a response.
Logging must not change program behavior.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DIAGNOSTICS_LOGGER = "errorshield.diagnostics"
QUIET_LOGGERS = ("uvicorn.access", "slowapi")


def resolve_level(level: str) -> int:
    """Translate a level name to its logging constant, defaulting to INFO."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Diagnostics are emitted at ERROR; keep them whatever the app level.
    logging.getLogger(DIAGNOSTICS_LOGGER).setLevel(logging.ERROR)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
