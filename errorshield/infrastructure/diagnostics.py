"""
Adapter: classification diagnostics over standard logging.

Implements DiagnosticLogger port.
"""

import logging
from contextlib import suppress
from typing import Optional

from errorshield.domain.errors.ports import DiagnosticEvent, DiagnosticLogger
from errorshield.shared.logging import DIAGNOSTICS_LOGGER


class LoggingDiagnosticLogger(DiagnosticLogger):
    """Writes diagnostic events to a logger at ERROR level.

    The raw message and stack only ever reach the log, never the client.
    Failures of the logging transport are suppressed.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER)

    def log_diagnostic(self, event: DiagnosticEvent) -> None:
        with suppress(Exception):
            if event.stack:
                self._logger.error(
                    "%s: %s: %s\n%s",
                    event.reason,
                    event.name,
                    event.message,
                    event.stack,
                )
            else:
                self._logger.error(
                    "%s: %s: %s", event.reason, event.name, event.message
                )
