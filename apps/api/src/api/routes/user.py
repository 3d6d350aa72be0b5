"""User routes: upstream lookup and payload validation."""

import json
import logging

from api.errors import ApiError
from api.models.responses import ErrorResponse
from api.services import get_user_client
from common.infra.http.user_client import UserDirectoryClient, UserLookupError
from common.models.user import UserValidationError, ValidationResult, validate_user
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get(
    "/user/{user_id}",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
def get_user(user_id: str, client: UserDirectoryClient = Depends(get_user_client)) -> JSONResponse:
    """Return the upstream user record unmodified.

    Upstream failures are logged and reported as a generic 500.
    """
    try:
        return JSONResponse(content=client.get_user(user_id))
    except UserLookupError as e:
        logger.error("Error fetching user %s: %s", user_id, e, exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch user data") from e


@router.post(
    "/validate-user",
    response_model=ValidationResult,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def validate_user_payload(request: Request) -> ValidationResult:
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object") from e

    if not isinstance(payload, dict):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    try:
        return validate_user(payload)
    except UserValidationError as e:
        raise ApiError(status.HTTP_400_BAD_REQUEST, e.message) from e
