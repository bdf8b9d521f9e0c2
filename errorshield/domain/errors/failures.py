"""
Closed set of failure shapes understood by the classifier.

Boundary adapters wrap every raised value into exactly one of these
variants. The FailureFamily order is the classification precedence.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional, Union

from errorshield.domain.errors.taxonomy import ErrorKind


class FailureFamily(IntEnum):
    """Failure families, lowest value matched first."""

    DOMAIN = 1
    STRUCTURED = 2
    UPSTREAM = 3
    PERSISTENCE = 4
    PERSISTENCE_INPUT = 5
    SCHEMA_VALIDATION = 6
    PARSE = 7
    TYPE = 8
    RUNTIME = 9
    UNKNOWN = 10


@dataclass(frozen=True)
class DomainFailure:
    """Application-raised error with a kind and optional status override."""

    family: ClassVar[FailureFamily] = FailureFamily.DOMAIN

    kind: ErrorKind
    message: Optional[str] = None
    status_override: Optional[int] = None


@dataclass(frozen=True)
class StructuredFailure:
    """Plain data carrying ad-hoc status/message fields."""

    family: ClassVar[FailureFamily] = FailureFamily.STRUCTURED

    status: Optional[int] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class UpstreamFailure:
    """Outbound call that came back with an error response."""

    family: ClassVar[FailureFamily] = FailureFamily.UPSTREAM

    status: int
    error_message: Optional[str] = None


@dataclass(frozen=True)
class PersistenceFailure:
    """Storage error tagged with a vendor operation code (SQLSTATE)."""

    family: ClassVar[FailureFamily] = FailureFamily.PERSISTENCE

    operation_code: str
    vendor_message: str = ""


@dataclass(frozen=True)
class PersistenceInputFailure:
    """Malformed query or filter shape rejected by the storage layer."""

    family: ClassVar[FailureFamily] = FailureFamily.PERSISTENCE_INPUT

    vendor_message: str = ""


@dataclass(frozen=True)
class SchemaValidationFailure:
    """Input rejected by a schema validator."""

    family: ClassVar[FailureFamily] = FailureFamily.SCHEMA_VALIDATION

    issues: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ParseFailure:
    """Malformed request body."""

    family: ClassVar[FailureFamily] = FailureFamily.PARSE

    message: str = ""


@dataclass(frozen=True)
class TypeFailure:
    """Invalid-operand programming fault."""

    family: ClassVar[FailureFamily] = FailureFamily.TYPE

    message: str = ""


@dataclass(frozen=True)
class RuntimeFailure:
    """Any other exception, reduced to name, message and stack."""

    family: ClassVar[FailureFamily] = FailureFamily.RUNTIME

    name: str
    message: str = ""
    stack: str = ""


@dataclass(frozen=True)
class UnknownFailure:
    """Value that is not an exception at all."""

    family: ClassVar[FailureFamily] = FailureFamily.UNKNOWN

    description: str = ""


Failure = Union[
    DomainFailure,
    StructuredFailure,
    UpstreamFailure,
    PersistenceFailure,
    PersistenceInputFailure,
    SchemaValidationFailure,
    ParseFailure,
    TypeFailure,
    RuntimeFailure,
    UnknownFailure,
]
