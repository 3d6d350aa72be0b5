"""Configuration management for the test app API."""

import os
from pathlib import Path

from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the API project directory (apps/api/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/api/src/api/config.py
    # So we go up 3 levels to get to apps/api/
    current_file = Path(__file__)
    api_dir = current_file.parent.parent.parent
    default_env_file = api_dir / ".env"
    return str(default_env_file)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "dependency-bot-test-app"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Upstream user directory
    user_api_base_url: str = "https://jsonplaceholder.typicode.com"
    user_api_timeout: float | None = 10.0

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("user_api_timeout", mode="before")
    @classmethod
    def _blank_timeout_means_none(cls, value):
        """An empty or "none" USER_API_TIMEOUT disables the timeout."""
        if isinstance(value, str) and value.strip().lower() in {"", "none", "null"}:
            return None
        return value


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings
