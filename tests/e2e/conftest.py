import os
from pathlib import Path
from typing import Iterator
from uuid import uuid4

import pytest
from testcontainers.postgres import PostgresContainer
from alembic.config import Config
from alembic import command
from fastapi.testclient import TestClient

from gymlog.db.connection import Database

# Ensure allowed environment for env_loader
os.environ.setdefault("ENV", "dev")


@pytest.fixture(scope="session")
def db_url() -> Iterator[str]:
    """Start a Postgres container, run migrations, and return the DB URL."""
    with PostgresContainer("postgres:16") as pg:
        raw_url = pg.get_connection_url()
        # Normalize to a plain libpq URL for psycopg
        url = raw_url.replace("postgresql+psycopg2://", "postgresql://")
        os.environ["DATABASE_URL"] = url

        # Run Alembic migrations against this database
        root_dir = Path(__file__).resolve().parents[2]
        alembic_cfg = Config(str(root_dir / "alembic.ini"))
        command.upgrade(alembic_cfg, "head")

        yield url


@pytest.fixture(scope="session")
def database(db_url: str) -> Database:
    return Database(db_url)


@pytest.fixture(scope="session")
def client(database: Database) -> Iterator[TestClient]:
    """Client for an app wired to the container database.

    Entering the client runs the app lifespan, so startup checks the
    connection exactly as it does in production.
    """
    from gymlog.app.app import create_app

    with TestClient(create_app(database)) as client:
        yield client


@pytest.fixture
def unique() -> str:
    """Short random suffix to keep usernames and program names distinct."""
    return uuid4().hex[:8]
