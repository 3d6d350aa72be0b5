"""Liveness and health check routes."""

from api.config import Settings, get_app_settings
from api.models.health import HealthCheckResponse, StatusResponse
from fastapi import APIRouter, Depends

router = APIRouter(tags=["health"])


@router.get("/", response_model=StatusResponse)
async def root() -> StatusResponse:
    """Liveness endpoint, always reports the service as running."""
    return StatusResponse()


@router.get("/api/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status and version information
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
    )
