"""REST client for the upstream user directory."""

import logging
from typing import Any
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


class UserLookupError(Exception):
    """Raised when the upstream user directory cannot serve a user record."""

    def __init__(self, user_id: str, message: str) -> None:
        super().__init__(message)
        self.user_id = user_id


class UserDirectoryClient:
    """Infrastructure layer: fetches user records from a JSON user directory."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the user directory client.

        Args:
            base_url: Base URL of the user directory, without the /users suffix
            timeout: Request timeout in seconds, None waits indefinitely
            session: Optional requests session to reuse connections
        """
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session

    def _get_user_url(self, user_id: str) -> str:
        return f"{self._base_url}/users/{quote(str(user_id), safe='')}"

    def get_user(self, user_id: str) -> Any:
        """Fetch a single user record.

        The decoded JSON body is returned unmodified.

        Args:
            user_id: User identifier as received from the caller

        Returns:
            Decoded JSON body of the upstream response

        Raises:
            UserLookupError: On network errors, non-2xx responses or invalid JSON
        """
        url = self._get_user_url(user_id)
        http = self._session or requests
        logger.debug("Fetching user %s from %s", user_id, url)

        try:
            response = http.get(url, timeout=self._timeout, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise UserLookupError(user_id, f"Request for user {user_id} failed: {e}") from e
        except ValueError as e:
            raise UserLookupError(user_id, f"Invalid JSON for user {user_id}: {e}") from e
