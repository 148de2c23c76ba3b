"""
Tests for user database operations.
"""

from unittest.mock import MagicMock
from uuid import UUID

import pytest
from psycopg.errors import UniqueViolation

from gymlog.db.errors import DuplicateRecordError
from gymlog.db.users import (
    UserCredentials,
    create_user,
    fetch_user_by_id,
    get_user_by_access_token,
    get_user_credentials,
)
from gymlog.models.user import User
from tests.db.conftest import executed_sql


TEST_USER_ID = UUID("11111111-1111-1111-1111-111111111111")
TEST_PROGRAM_ID = UUID("22222222-2222-2222-2222-222222222222")
TEST_TOKEN = "ab" * 128


class TestCreateUser:
    """Test create_user function."""

    def test_create_user_success(self, db: MagicMock, mock_cursor: MagicMock):
        mock_cursor.fetchone.return_value = (TEST_USER_ID, "alice", TEST_TOKEN)

        user = create_user(db, "alice", "hashed", TEST_TOKEN)

        assert isinstance(user, User)
        assert user.id == TEST_USER_ID
        assert user.username == "alice"
        assert user.access_token == TEST_TOKEN
        assert user.program == []

        sql, params = mock_cursor.execute.call_args.args
        assert "INSERT INTO users" in sql
        assert params == ("alice", "hashed", TEST_TOKEN)

    def test_duplicate_username(self, db: MagicMock, mock_cursor: MagicMock):
        mock_cursor.execute.side_effect = UniqueViolation("duplicate key")

        with pytest.raises(DuplicateRecordError, match="alice"):
            create_user(db, "alice", "hashed", TEST_TOKEN)


class TestGetUserByAccessToken:
    """Test get_user_by_access_token function."""

    def test_user_found(self, db: MagicMock, mock_cursor: MagicMock):
        mock_cursor.fetchone.return_value = (TEST_USER_ID, "alice", TEST_TOKEN)
        mock_cursor.fetchall.return_value = [(TEST_PROGRAM_ID,)]

        user = get_user_by_access_token(db, TEST_TOKEN)

        assert user is not None
        assert user.id == TEST_USER_ID
        assert user.program == [TEST_PROGRAM_ID]
        first_sql, first_params = mock_cursor.execute.call_args_list[0].args
        assert "WHERE access_token = %s" in first_sql
        assert first_params == (TEST_TOKEN,)

    def test_user_not_found(self, db: MagicMock, mock_cursor: MagicMock):
        mock_cursor.fetchone.return_value = None

        assert get_user_by_access_token(db, "nope") is None
        # No follow-up query for program references
        assert mock_cursor.execute.call_count == 1


class TestGetUserCredentials:
    """Test get_user_credentials function."""

    def test_returns_user_and_hash(self, db: MagicMock, mock_cursor: MagicMock):
        mock_cursor.fetchone.return_value = (
            TEST_USER_ID,
            "alice",
            TEST_TOKEN,
            "stored-hash",
        )
        mock_cursor.fetchall.return_value = []

        credentials = get_user_credentials(db, "alice")

        assert isinstance(credentials, UserCredentials)
        assert credentials.password_hash == "stored-hash"
        assert credentials.user.username == "alice"
        assert credentials.user.access_token == TEST_TOKEN

    def test_unknown_username(self, db: MagicMock, mock_cursor: MagicMock):
        mock_cursor.fetchone.return_value = None
        assert get_user_credentials(db, "nobody") is None


class TestFetchUserById:
    """Test fetch_user_by_id function."""

    def test_program_references_in_order(self, mock_cursor: MagicMock):
        other_program = UUID("44444444-4444-4444-4444-444444444444")
        mock_cursor.fetchone.return_value = (TEST_USER_ID, "alice", TEST_TOKEN)
        mock_cursor.fetchall.return_value = [(TEST_PROGRAM_ID,), (other_program,)]

        user = fetch_user_by_id(mock_cursor, TEST_USER_ID)

        assert user is not None
        assert user.program == [TEST_PROGRAM_ID, other_program]
        assert "ORDER BY id" in executed_sql(mock_cursor)[1]
