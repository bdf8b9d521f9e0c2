"""
Error classification context: domain layer.

- Taxonomy of error kinds and status classes
- DomainError raised by application code
- Closed set of failure shapes
- Classifier and its diagnostic port
"""

from errorshield.domain.errors.classifier import ClassificationResult, Classifier
from errorshield.domain.errors.exceptions import DomainError
from errorshield.domain.errors.taxonomy import ErrorKind, SuccessMessage

__all__ = [
    "ClassificationResult",
    "Classifier",
    "DomainError",
    "ErrorKind",
    "SuccessMessage",
]
