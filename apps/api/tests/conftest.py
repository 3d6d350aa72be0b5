"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from api.config import Settings
from api.main import create_app
from fastapi import FastAPI
from fastapi.testclient import TestClient


class FakeUserClient:
    """Stands in for UserDirectoryClient in route tests."""

    def __init__(self, record=None, error: Exception | None = None) -> None:
        self.record = record
        self.error = error
        self.requested: list[str] = []

    def get_user(self, user_id: str):
        self.requested.append(user_id)
        if self.error is not None:
            raise self.error
        return self.record


@pytest.fixture
def fake_user_client() -> type[FakeUserClient]:
    """Factory for fake upstream clients, install with app.dependency_overrides."""
    return FakeUserClient


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(
        _env_file=None,
        environment="test",
        user_api_base_url="http://users.test",
        user_api_timeout=1.0,
    )


@pytest.fixture
def app(settings: Settings) -> Iterator[FastAPI]:
    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)
