from typing import Iterator
from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gymlog.app.app import create_app
from gymlog.db.connection import Database
from gymlog.models.user import User


# Shared test user data
TEST_USER_ID = UUID("00000000-0000-0000-0000-000000000001")
TEST_ACCESS_TOKEN = "0123456789abcdef" * 16


def _create_test_user() -> User:
    return User(
        id=TEST_USER_ID,
        username="test_user",
        access_token=TEST_ACCESS_TOKEN,
        program=[],
    )


@pytest.fixture
def database() -> MagicMock:
    """Stand-in database handle; data-access functions are patched per test."""
    return MagicMock(spec=Database)


@pytest.fixture
def app(database: MagicMock) -> FastAPI:
    return create_app(database)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_client(app: FastAPI) -> Iterator[TestClient]:
    """Test client that sends a token the mocked user lookup accepts."""

    def mock_lookup(db, access_token: str):
        if access_token == TEST_ACCESS_TOKEN:
            return _create_test_user()
        return None

    # Mock at the location where it's imported, not where it's defined
    with patch("gymlog.app.auth.get_user_by_access_token", side_effect=mock_lookup):
        client = TestClient(app)
        client.headers = {"Authorization": TEST_ACCESS_TOKEN}
        yield client
