"""Infrastructure layer for external communication."""

from common.infra.http.user_client import UserDirectoryClient, UserLookupError

__all__ = [
    "UserDirectoryClient",
    "UserLookupError",
]
