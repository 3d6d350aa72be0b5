"""Response models for the utility endpoints."""

from pydantic import BaseModel, Field


class ChunkedDataResponse(BaseModel):
    original: list[int]
    processed: list[list[int]]


class GeneratedIdResponse(BaseModel):
    id: str = Field(..., description="Random UUID4, 36 characters")
    timestamp: str = Field(..., description="ISO-8601 UTC generation time")


class FutureDateResponse(BaseModel):
    days: int
    date: str = Field(..., description="Today plus the offset, as YYYY-MM-DD")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
