"""Date arithmetic route."""

import logging

from api.errors import ApiError
from api.models.responses import ErrorResponse, FutureDateResponse
from common.utils.dates import format_future_date, parse_days
from fastapi import APIRouter, status

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dates"])


@router.get(
    "/date/{days}",
    response_model=FutureDateResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def get_future_date(days: str) -> FutureDateResponse:
    """Return today's date shifted by ``days``.

    Non-numeric or out-of-range offsets are rejected with 400.
    """
    try:
        offset = parse_days(days)
        future = format_future_date(offset)
    except ValueError as e:
        logger.info("Rejected day offset %r: %s", days, e)
        raise ApiError(status.HTTP_400_BAD_REQUEST, str(e)) from e
    return FutureDateResponse(days=offset, date=future)
