"""Data chunking route."""

from api.models.responses import ChunkedDataResponse
from common.utils.chunking import chunk
from fastapi import APIRouter

router = APIRouter(tags=["data"])

SAMPLE_DATA = (1, 2, 3, 4, 5, 6)
CHUNK_SIZE = 2


@router.get("/data", response_model=ChunkedDataResponse)
async def get_data() -> ChunkedDataResponse:
    data = list(SAMPLE_DATA)
    return ChunkedDataResponse(original=data, processed=chunk(data, CHUNK_SIZE))
