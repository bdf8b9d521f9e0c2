"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure
is consistently translated into an API response.
"""

from errorshield.shared.errors.engine import (
    ErrorOutcome,
    ErrorResponder,
    classify_and_format,
)

__all__ = ["ErrorOutcome", "ErrorResponder", "classify_and_format"]
