"""Health check response models."""

from pydantic import BaseModel, ConfigDict


class StatusResponse(BaseModel):
    """Liveness payload served at the root path."""

    message: str = "LLM Dependency Bot Test App"
    status: str = "running"


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str | None = None
    message: str = "API is healthy"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "environment": "development",
                "message": "API is healthy",
            }
        }
    )
