"""
Disclosure policy.

Decides which message a client sees for a classified failure.
In disclosure mode the raw message is shown; otherwise each status
class shows its one non-leaky message.
"""

from errorshield.domain.errors.classifier import ClassificationResult
from errorshield.domain.errors.taxonomy import canonical_message, safe_message
from errorshield.interfaces.schemas import ResponseEnvelope


class DisclosurePolicy:
    """Formats classification results into error envelopes."""

    @staticmethod
    def message_for(result: ClassificationResult, disclose: bool) -> str:
        """Return the raw message when disclosing, else the safe class message."""
        if disclose:
            return result.raw_message or canonical_message(result.kind)
        return safe_message(result.status, result.kind)

    def format(
        self, result: ClassificationResult, disclose: bool
    ) -> ResponseEnvelope[None]:
        """Build the error envelope for a result.

        Args:
            result: Output of the classifier.
            disclose: Whether raw messages may reach the client.

        Returns:
            An envelope with success False and no data.
        """
        return ResponseEnvelope[None].error(self.message_for(result, disclose))
