"""
Error engine: any failure -> status code + envelope.

Pipeline: wrap_failure -> Classifier.classify -> DisclosurePolicy.format.
The engine never raises; the caller writes the status and serializes
the envelope.
"""

from dataclasses import dataclass
from typing import Optional

from errorshield.domain.errors.classifier import ClassificationResult, Classifier
from errorshield.interfaces.schemas import ResponseEnvelope
from errorshield.shared.errors.adapters import wrap_failure
from errorshield.shared.errors.disclosure import DisclosurePolicy

_default_classifier = Classifier()
_policy = DisclosurePolicy()


@dataclass(frozen=True)
class ErrorOutcome:
    """Status code and envelope ready to be sent."""

    status: int
    envelope: ResponseEnvelope[None]
    result: ClassificationResult


def classify_and_format(
    failure: object,
    disclose: bool,
    classifier: Optional[Classifier] = None,
) -> ErrorOutcome:
    """Classify any failure value and format its error envelope.

    Args:
        failure: Whatever was raised or returned as an error.
        disclose: Whether raw messages may reach the client.
        classifier: Classifier to use. Defaults to one without diagnostics.

    Returns:
        ErrorOutcome with the resolved status and envelope.
    """
    result = (classifier or _default_classifier).classify(wrap_failure(failure))
    return ErrorOutcome(
        status=result.status,
        envelope=_policy.format(result, disclose),
        result=result,
    )


class ErrorResponder:
    """Error engine with the disclosure mode fixed at startup.

    Args:
        classifier: Classifier used for every failure.
        disclose: Disclosure mode for the lifetime of the process.
    """

    def __init__(self, classifier: Classifier, disclose: bool) -> None:
        self._classifier = classifier
        self._disclose = disclose

    @property
    def disclose(self) -> bool:
        return self._disclose

    def respond(self, failure: object) -> ErrorOutcome:
        """Resolve a failure to its status and envelope."""
        return classify_and_format(failure, self._disclose, self._classifier)
