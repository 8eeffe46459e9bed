"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from userapi.core.config import Settings


@pytest.fixture
def app_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def app(app_settings):
    """Fresh application per test so rate-limit counters never leak."""
    from userapi.main import create_app

    return create_app(app_settings)


@pytest.fixture
def client(app) -> TestClient:
    """Create test client."""
    return TestClient(app)
