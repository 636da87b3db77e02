import os

# Set environment variables BEFORE any imports that might use settings
os.environ["API_PREFIX"] = ""
os.environ["FRONTEND_URL"] = ""
os.environ["LOG_LEVEL"] = "INFO"

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


@pytest.fixture(scope="function")
def app():
    """Create a fresh application with default settings for each test."""
    return create_app(Settings())


@pytest.fixture(scope="function")
def client(app):
    """Create a test client for the application."""
    return TestClient(app)


@pytest.fixture(scope="function")
def make_client():
    """Build a test client from explicit settings overrides."""

    def _make_client(**overrides) -> TestClient:
        return TestClient(create_app(Settings(**overrides)))

    return _make_client
