"""
Failure classifier.

Resolves a wrapped failure to (status, kind, raw message).
Classification is pure; the only side effect is the optional
diagnostic report, which can never change the result.
"""

from contextlib import suppress
from dataclasses import dataclass
from typing import Callable, Optional

from errorshield.domain.errors.failures import (
    DomainFailure,
    Failure,
    FailureFamily,
    ParseFailure,
    PersistenceFailure,
    PersistenceInputFailure,
    RuntimeFailure,
    SchemaValidationFailure,
    StructuredFailure,
    TypeFailure,
    UnknownFailure,
    UpstreamFailure,
)
from errorshield.domain.errors.ports import (
    DiagnosticEvent,
    DiagnosticLogger,
    NullDiagnosticLogger,
)
from errorshield.domain.errors.taxonomy import (
    HTTP_400,
    HTTP_404,
    HTTP_409,
    HTTP_500,
    ErrorKind,
    default_status,
    is_http_status,
    kind_from_message,
)


# PostgreSQL SQLSTATE -> (status, kind)
PERSISTENCE_CODES: dict[str, tuple[int, ErrorKind]] = {
    "23505": (HTTP_409, ErrorKind.RESOURCE_ALREADY_EXISTS),  # unique_violation
    "02000": (HTTP_404, ErrorKind.RESOURCE_NOT_FOUND),  # no_data
    "P0002": (HTTP_404, ErrorKind.RESOURCE_NOT_FOUND),  # no_data_found
    "23503": (HTTP_409, ErrorKind.FOREIGN_KEY_CONSTRAINT_FAILED),
    "2BP01": (HTTP_409, ErrorKind.CONSTRAINT_VIOLATION),  # dependent_objects_still_exist
    "22P02": (HTTP_400, ErrorKind.INVALID_DATA_FORMAT),  # invalid_text_representation
    "22001": (HTTP_400, ErrorKind.VALUE_TOO_LONG),  # string_data_right_truncation
    "23514": (HTTP_400, ErrorKind.INVALID_RELATION_CONSTRAINT),  # check_violation
    "22003": (HTTP_400, ErrorKind.VALUE_OUT_OF_RANGE),
}


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one failure."""

    status: int
    kind: ErrorKind
    raw_message: str


class Classifier:
    """Maps wrapped failures to a ClassificationResult.

    Holds no mutable state: classifying the same failure twice gives
    the same result.

    Args:
        diagnostics: Port receiving events for unknown persistence codes,
            unclassified runtime failures and unknown values. Defaults to
            a no-op.
    """

    def __init__(self, diagnostics: Optional[DiagnosticLogger] = None) -> None:
        self._diagnostics = diagnostics or NullDiagnosticLogger()
        self._handlers: dict[FailureFamily, Callable[..., ClassificationResult]] = {
            FailureFamily.DOMAIN: self._classify_domain,
            FailureFamily.STRUCTURED: self._classify_structured,
            FailureFamily.UPSTREAM: self._classify_upstream,
            FailureFamily.PERSISTENCE: self._classify_persistence,
            FailureFamily.PERSISTENCE_INPUT: self._classify_persistence_input,
            FailureFamily.SCHEMA_VALIDATION: self._classify_schema_validation,
            FailureFamily.PARSE: self._classify_parse,
            FailureFamily.TYPE: self._classify_type,
            FailureFamily.RUNTIME: self._classify_runtime,
            FailureFamily.UNKNOWN: self._classify_unknown,
        }

    def classify(self, failure: Failure) -> ClassificationResult:
        """Resolve a failure to its status, kind and raw message."""
        family = getattr(failure, "family", None)
        handler = None
        if isinstance(family, FailureFamily):
            handler = self._handlers.get(family)
        if handler is None:
            return self._classify_unknown(UnknownFailure(type(failure).__name__))
        return handler(failure)

    # ── families ──────────────────────────────────────────────────

    def _classify_domain(self, failure: DomainFailure) -> ClassificationResult:
        status = failure.status_override
        return self._resolve(
            failure.kind, status if is_http_status(status) else None, failure.message
        )

    def _classify_structured(
        self, failure: StructuredFailure
    ) -> ClassificationResult:
        kind = kind_from_message(failure.message)
        status = failure.status if is_http_status(failure.status) else None
        return self._resolve(kind, status, failure.message)

    def _classify_upstream(self, failure: UpstreamFailure) -> ClassificationResult:
        message = failure.error_message or ErrorKind.GENERIC_ERROR.value
        kind = kind_from_message(message)
        if not is_http_status(failure.status):
            return ClassificationResult(default_status(kind), kind, message)
        return ClassificationResult(failure.status, kind, message)

    def _classify_persistence(
        self, failure: PersistenceFailure
    ) -> ClassificationResult:
        known = PERSISTENCE_CODES.get(failure.operation_code)
        if known is not None:
            status, kind = known
            return ClassificationResult(status, kind, kind.value)

        self._report(
            DiagnosticEvent(
                reason="unhandled_persistence_code",
                name=failure.operation_code,
                message=failure.vendor_message,
            )
        )
        return ClassificationResult(
            HTTP_500,
            ErrorKind.INTERNAL_ERROR,
            failure.vendor_message or ErrorKind.INTERNAL_ERROR.value,
        )

    def _classify_persistence_input(
        self, failure: PersistenceInputFailure
    ) -> ClassificationResult:
        return ClassificationResult(
            HTTP_400,
            ErrorKind.INVALID_DATA_FORMAT,
            failure.vendor_message or ErrorKind.INVALID_DATA_FORMAT.value,
        )

    def _classify_schema_validation(
        self, failure: SchemaValidationFailure
    ) -> ClassificationResult:
        # Issues stay out of the envelope; only the category is reported.
        return ClassificationResult(
            HTTP_400, ErrorKind.INVALID_DATA_FORMAT, ErrorKind.INVALID_DATA_FORMAT.value
        )

    def _classify_parse(self, failure: ParseFailure) -> ClassificationResult:
        return ClassificationResult(
            HTTP_400,
            ErrorKind.INVALID_REQUEST,
            failure.message or ErrorKind.INVALID_REQUEST.value,
        )

    def _classify_type(self, failure: TypeFailure) -> ClassificationResult:
        return ClassificationResult(
            HTTP_400,
            ErrorKind.INVALID_REQUEST,
            failure.message or ErrorKind.INVALID_REQUEST.value,
        )

    def _classify_runtime(self, failure: RuntimeFailure) -> ClassificationResult:
        self._report(
            DiagnosticEvent(
                reason="unclassified_failure",
                name=failure.name,
                message=failure.message,
                stack=failure.stack,
            )
        )
        return ClassificationResult(
            HTTP_500, ErrorKind.GENERIC_ERROR, failure.message or failure.name
        )

    def _classify_unknown(self, failure: UnknownFailure) -> ClassificationResult:
        self._report(
            DiagnosticEvent(
                reason="unknown_failure",
                name=UnknownFailure.__name__,
                message=failure.description,
            )
        )
        return ClassificationResult(
            HTTP_500,
            ErrorKind.GENERIC_ERROR,
            failure.description or ErrorKind.GENERIC_ERROR.value,
        )

    # ── helpers ───────────────────────────────────────────────────

    @staticmethod
    def _resolve(
        kind: ErrorKind, status: Optional[int], message: Optional[str]
    ) -> ClassificationResult:
        resolved_status = status if status is not None else default_status(kind)
        return ClassificationResult(resolved_status, kind, message or kind.value)

    def _report(self, event: DiagnosticEvent) -> None:
        # A failing diagnostics transport must never block the response.
        with suppress(Exception):
            self._diagnostics.log_diagnostic(event)
