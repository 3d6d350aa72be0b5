"""API response models."""

from api.models.health import HealthCheckResponse, StatusResponse
from api.models.responses import (
    ChunkedDataResponse,
    ErrorResponse,
    FutureDateResponse,
    GeneratedIdResponse,
)

__all__ = [
    "ChunkedDataResponse",
    "ErrorResponse",
    "FutureDateResponse",
    "GeneratedIdResponse",
    "HealthCheckResponse",
    "StatusResponse",
]
