"""Database operations for user accounts."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import psycopg
from psycopg.errors import UniqueViolation

from gymlog.models.user import User
from .connection import Database
from .errors import DuplicateRecordError

logger = logging.getLogger(__name__)


@dataclass
class UserCredentials:
    """A user together with the stored password hash, for login checks."""

    user: User
    password_hash: str


def create_user(
    db: Database,
    username: str,
    password_hash: str,
    access_token: str,
) -> User:
    """Create a new user record.

    Args:
        db: Database handle.
        username: Unique login name.
        password_hash: Already-hashed password; the raw password never reaches here.
        access_token: Bearer token issued to the user. Never changes afterwards.

    Raises:
        DuplicateRecordError: If the username is already taken.
    """
    try:
        with db.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO users (username, password_hash, access_token)
                VALUES (%s, %s, %s)
                RETURNING id, username, access_token
                """,
                (username, password_hash, access_token),
            )
            row = cursor.fetchone()
    except UniqueViolation as e:
        logger.info(f"Rejected duplicate username {username!r}")
        raise DuplicateRecordError(f"Username '{username}' is already taken") from e

    user = _row_to_user(row, program_ids=[])
    logger.info(f"Created user id={user.id} username={user.username}")
    return user


def get_user_by_access_token(db: Database, access_token: str) -> Optional[User]:
    """Get the user holding exactly this access token, if any."""
    with db.cursor() as cursor:
        cursor.execute(
            """
            SELECT id, username, access_token
            FROM users
            WHERE access_token = %s
            """,
            (access_token,),
        )
        row = cursor.fetchone()
        if row is None:
            logger.debug("No user matches the presented access token")
            return None
        return _row_to_user(row, program_ids=_program_ids(cursor, row[0]))


def get_user_credentials(db: Database, username: str) -> Optional[UserCredentials]:
    """Get a user and its password hash by username."""
    with db.cursor() as cursor:
        cursor.execute(
            """
            SELECT id, username, access_token, password_hash
            FROM users
            WHERE username = %s
            """,
            (username,),
        )
        row = cursor.fetchone()
        if row is None:
            return None
        user = _row_to_user(row[:3], program_ids=_program_ids(cursor, row[0]))
        return UserCredentials(user=user, password_hash=row[3])


def fetch_user_by_id(cursor: psycopg.Cursor, user_id: UUID) -> Optional[User]:
    """Read a user on an already-open cursor (inside a larger transaction)."""
    cursor.execute(
        """
        SELECT id, username, access_token
        FROM users
        WHERE id = %s
        """,
        (user_id,),
    )
    row = cursor.fetchone()
    if row is None:
        return None
    return _row_to_user(row, program_ids=_program_ids(cursor, user_id))


def _program_ids(cursor: psycopg.Cursor, user_id: UUID) -> list[UUID]:
    """Program references of a user, in the order they were added."""
    cursor.execute(
        """
        SELECT program_id
        FROM user_programs
        WHERE user_id = %s
        ORDER BY id
        """,
        (user_id,),
    )
    return [program_id for (program_id,) in cursor.fetchall()]


def _row_to_user(row, program_ids: list[UUID]) -> User:
    """Convert a database row to a User object."""
    id, username, access_token = row
    return User(
        id=id,
        username=username,
        access_token=access_token,
        program=program_ids,
    )
