"""
Application-raised errors.

Business code raises DomainError at the point of failure. The error is
mapped to an HTTP response at the interface layer.
No framework imports allowed.
"""

from typing import Optional, Union

from errorshield.domain.errors.taxonomy import (
    ErrorKind,
    default_status,
    is_http_status,
    kind_from_message,
)


class DomainError(Exception):
    """Error carrying a canonical kind and an optional status override.

    Args:
        kind: An ErrorKind, or a raw message that is resolved to one.
            Unrecognized messages resolve to GENERIC_ERROR.
        message: Optional custom message. Defaults to the raw string given
            as ``kind`` or to the kind's canonical text.
        status: Optional HTTP status that wins over the kind's default.
            Values outside 100-599 are ignored.
    """

    def __init__(
        self,
        kind: Union[ErrorKind, str] = ErrorKind.GENERIC_ERROR,
        message: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        resolved = kind_from_message(kind)
        if message is None:
            message = resolved.value if isinstance(kind, ErrorKind) else str(kind)
        self._kind = resolved
        self._message = message
        self._status_override = status
        super().__init__(message)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_override(self) -> Optional[int]:
        return self._status_override

    @property
    def status(self) -> int:
        """Resolved HTTP status: a valid override, else the kind default."""
        if is_http_status(self._status_override):
            return self._status_override
        return default_status(self._kind)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind.name}, "
            f"message={self._message!r}, status={self.status})"
        )
