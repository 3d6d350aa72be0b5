"""HTTP clients for upstream services."""

from common.infra.http.user_client import UserDirectoryClient, UserLookupError

__all__ = ["UserDirectoryClient", "UserLookupError"]
