import pytest
from gymlog.app import env_loader  # noqa: F401

from ._factories import UserFactory, ProgramFactory, ExerciseFactory


class AccidentalDatabaseAccessError(Exception):
    """Raised when a unit test accidentally tries to access the database."""

    pass


def _raise_db_access_error(*args, **kwargs):
    """Raise an error when DB access is attempted in unit tests."""
    raise AccidentalDatabaseAccessError(
        "Unit test attempted to connect to the database! "
        "Either mock the data-access function (e.g. @patch('gymlog.app.routers.users.create_user')) "
        "or pass a mocked Database, or mark this test as @pytest.mark.e2e if it requires real DB access."
    )


@pytest.fixture(autouse=True)
def prevent_db_access_in_unit_tests(request, monkeypatch):
    """Prevent accidental database access in unit tests.

    For e2e tests (marked with @pytest.mark.e2e) this does nothing. For all other
    tests, psycopg.connect is patched to raise a clear error if any code path
    tries to reach the database without proper mocking.
    """
    markers = [marker.name for marker in request.node.iter_markers()]
    if "e2e" in markers:
        yield
        return

    monkeypatch.setattr("psycopg.connect", _raise_db_access_error)
    yield


@pytest.fixture(scope="session")
def user_factory() -> UserFactory:
    return UserFactory()


@pytest.fixture(scope="session")
def program_factory() -> ProgramFactory:
    return ProgramFactory()


@pytest.fixture(scope="session")
def exercise_factory() -> ExerciseFactory:
    return ExerciseFactory()
