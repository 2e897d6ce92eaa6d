"""
Shared fixtures: environment, API client, payloads and mocks.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

# Predictable settings before anything imports the app
os.environ.setdefault("PYTHON_ENV", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from admissions.core.config import Settings  # noqa: E402
from admissions.main import create_app  # noqa: E402
from tests.helpers import (  # noqa: E402
    make_profile_payload,
    make_register_payload,
    register_and_login,
)


@pytest.fixture
def client(tmp_path):
    """TestClient against a fresh SQLite database per test."""
    settings = Settings(
        python_env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        database_auto_create=True,
    )
    app = create_app(settings)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_payload():
    return make_register_payload()


@pytest.fixture
def profile_payload():
    return make_profile_payload()


@pytest.fixture
def auth_headers(client):
    """Auth headers for the default applicant."""
    return register_and_login(client)


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.get = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db
