from unittest.mock import MagicMock

import pytest

from gymlog.db.connection import Database


@pytest.fixture
def mock_cursor() -> MagicMock:
    return MagicMock()


@pytest.fixture
def db(mock_cursor: MagicMock) -> MagicMock:
    """A Database whose cursor() context yields `mock_cursor`."""
    db = MagicMock(spec=Database)
    db.cursor.return_value.__enter__.return_value = mock_cursor
    return db


def executed_sql(mock_cursor: MagicMock) -> list[str]:
    """All SQL statements passed to cursor.execute, in order."""
    return [call.args[0] for call in mock_cursor.execute.call_args_list]
