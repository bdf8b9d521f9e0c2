"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter

from errorshield.core.config import settings
from errorshield.domain.errors.taxonomy import SuccessMessage
from errorshield.interfaces.schemas import HealthResponse, ResponseEnvelope

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=ResponseEnvelope[HealthResponse],
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> ResponseEnvelope[HealthResponse]:
    """Return current application health status."""
    return ResponseEnvelope[HealthResponse].ok(
        SuccessMessage.RESOURCE_RETRIEVED,
        HealthResponse(status="ok", version=settings.version),
    )
