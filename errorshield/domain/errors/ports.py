"""
Port interfaces for the error classification context.

The classifier reports diagnostics through this port.
Infrastructure adapters implement it; tests inject the no-op one.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticEvent:
    """A failure worth logging for diagnosis.

    Attributes:
        reason: Why the event was raised (e.g. "unclassified_failure").
        name: Exception class name or vendor code.
        message: Raw, unredacted message.
        stack: Formatted traceback, empty when unavailable.
    """

    reason: str
    name: str
    message: str
    stack: str = ""


class DiagnosticLogger(ABC):
    """Port for reporting classification diagnostics."""

    @abstractmethod
    def log_diagnostic(self, event: DiagnosticEvent) -> None:
        """Record a diagnostic event. Must not block the response path."""
        raise NotImplementedError


class NullDiagnosticLogger(DiagnosticLogger):
    """Diagnostic logger that discards every event."""

    def log_diagnostic(self, event: DiagnosticEvent) -> None:
        return None
