"""Service initialization and dependency injection."""

from api.config import Settings, get_app_settings
from common.infra.http.user_client import UserDirectoryClient
from fastapi import Depends


def get_user_client(settings: Settings = Depends(get_app_settings)) -> UserDirectoryClient:
    """Get a user directory client for the configured upstream.

    Args:
        settings: Application settings

    Returns:
        UserDirectoryClient instance
    """
    return UserDirectoryClient(
        base_url=settings.user_api_base_url,
        timeout=settings.user_api_timeout,
    )
