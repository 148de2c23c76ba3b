import os
import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "postgresql://localhost/project-final"


def get_database_url() -> str:
    """Get the database URL from environment variables."""
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def get_sqlalchemy_database_url() -> str:
    """Get the database URL formatted for SQLAlchemy (used by Alembic).

    Automatically converts postgresql:// to postgresql+psycopg://
    to ensure psycopg3 is used instead of psycopg2.
    """
    url = get_database_url()
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


class Database:
    """Handle to the application database.

    Built once when the app is created and handed to route handlers through
    the `get_database` dependency. Each unit of work opens its own connection,
    so concurrent requests never share one.
    """

    def __init__(self, url: str):
        self.url = url

    @classmethod
    def from_env(cls) -> "Database":
        return cls(get_database_url())

    @contextmanager
    def connection(self) -> Iterator[psycopg.Connection]:
        """Get a database connection context manager.

        Explicitly closes the connection when the block exits.
        """
        conn = psycopg.connect(self.url)
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def cursor(self) -> Iterator[psycopg.Cursor]:
        """Get a database cursor context manager.

        Everything executed on the cursor is one transaction: committed when
        the block completes, rolled back if it raises.
        """
        with self.connection() as conn:
            with conn.cursor() as cursor:
                try:
                    yield cursor
                    conn.commit()
                except Exception:
                    conn.rollback()
                    raise

    def check_connection(self) -> None:
        """Run a trivial query, raising if the database is unreachable."""
        with self.cursor() as cursor:
            cursor.execute("SELECT 1")
        logger.info("Database connection verified")
