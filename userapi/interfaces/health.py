"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic.
"""

from fastapi import APIRouter

from userapi.interfaces.users.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns a fixed status confirming the server is up.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", message="Server is running")
