"""Identifier generation route."""

from datetime import datetime, timezone

from api.models.responses import GeneratedIdResponse
from common.utils.ids import generate_id
from fastapi import APIRouter

router = APIRouter(tags=["ids"])


@router.get("/id", response_model=GeneratedIdResponse)
async def get_id() -> GeneratedIdResponse:
    return GeneratedIdResponse(
        id=generate_id(),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
