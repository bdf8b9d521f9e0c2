"""
Pydantic schemas for the API response contract.

Every response body, success or failure, uses the same envelope.
No business logic belongs here.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from errorshield.domain.errors.taxonomy import SuccessMessage

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """Uniform response wrapper.

    Attributes:
        success: False for every error response.
        message: Public message from the closed vocabulary, or the raw
            message when errors are disclosed.
        data: Payload, always None for error responses.
    """

    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(
        cls, message: SuccessMessage, data: Optional[T] = None
    ) -> "ResponseEnvelope[T]":
        """Build a success envelope."""
        return cls(success=True, message=message.value, data=data)

    @classmethod
    def error(cls, message: str) -> "ResponseEnvelope[T]":
        """Build an error envelope."""
        return cls(success=False, message=message, data=None)


class HealthResponse(BaseModel):
    """Response payload for the health check endpoint."""

    status: str = Field(..., description="Application status")
    version: str = Field(..., description="API version")
