"""Database operations for workout programs.

A user's program list is stored in `user_programs`; a program's exercise list
in `program_exercises`. Both are append-only and ordered by insertion.
"""

import logging
from typing import Optional
from uuid import UUID

import psycopg
from psycopg.errors import UniqueViolation

from gymlog.models.program import Program, ProgramCreate
from gymlog.models.user import User, UserWithPrograms
from .connection import Database
from .errors import DuplicateRecordError, RecordNotFoundError
from .users import fetch_user_by_id

logger = logging.getLogger(__name__)


def create_program_for_user(
    db: Database, user_id: UUID, program: ProgramCreate
) -> User:
    """Create a program and append it to a user's program list.

    Both steps run in one transaction, so a failure in either leaves no
    orphaned program behind.

    Returns:
        The user as it is after the append.

    Raises:
        RecordNotFoundError: If the user does not exist.
        DuplicateRecordError: If the program name is already taken.
    """
    try:
        with db.cursor() as cursor:
            # Lock the owner row so the append can't race a concurrent one.
            cursor.execute("SELECT id FROM users WHERE id = %s FOR UPDATE", (user_id,))
            if cursor.fetchone() is None:
                raise RecordNotFoundError(f"User {user_id} not found")

            cursor.execute(
                """
                INSERT INTO programs (program_type, program_name)
                VALUES (%s, %s)
                RETURNING id
                """,
                (program.program_type, program.program_name),
            )
            (program_id,) = cursor.fetchone()
            cursor.execute(
                "INSERT INTO user_programs (user_id, program_id) VALUES (%s, %s)",
                (user_id, program_id),
            )
            user = fetch_user_by_id(cursor, user_id)
    except UniqueViolation as e:
        raise DuplicateRecordError(
            f"Program name '{program.program_name}' is already taken"
        ) from e

    logger.info(f"Created program id={program_id} for user id={user_id}")
    return user


def get_user_with_programs(db: Database, user_id: UUID) -> Optional[UserWithPrograms]:
    """Get a user with its program references expanded one level."""
    with db.cursor() as cursor:
        user = fetch_user_by_id(cursor, user_id)
        if user is None:
            return None
        cursor.execute(
            """
            SELECT p.id, p.program_type, p.program_name, p.created_at
            FROM user_programs up
            JOIN programs p ON p.id = up.program_id
            WHERE up.user_id = %s
            ORDER BY up.id
            """,
            (user_id,),
        )
        rows = cursor.fetchall()
        exercise_ids = _exercise_ids_by_program(cursor, [row[0] for row in rows])
        programs = [_row_to_program(row, exercise_ids.get(row[0], [])) for row in rows]

    logger.debug(f"Expanded {len(programs)} programs for user id={user_id}")
    return UserWithPrograms(
        id=user.id,
        username=user.username,
        access_token=user.access_token,
        program=programs,
    )


def fetch_program_by_id(cursor: psycopg.Cursor, program_id: UUID) -> Optional[Program]:
    """Read a program on an already-open cursor (inside a larger transaction)."""
    cursor.execute(
        """
        SELECT id, program_type, program_name, created_at
        FROM programs
        WHERE id = %s
        """,
        (program_id,),
    )
    row = cursor.fetchone()
    if row is None:
        return None
    exercise_ids = _exercise_ids_by_program(cursor, [program_id])
    return _row_to_program(row, exercise_ids.get(program_id, []))


def _exercise_ids_by_program(
    cursor: psycopg.Cursor, program_ids: list[UUID]
) -> dict[UUID, list[UUID]]:
    """Exercise references for each of the given programs, in insertion order."""
    if not program_ids:
        return {}
    cursor.execute(
        """
        SELECT program_id, exercise_id
        FROM program_exercises
        WHERE program_id = ANY(%s)
        ORDER BY id
        """,
        (program_ids,),
    )
    exercise_ids: dict[UUID, list[UUID]] = {}
    for program_id, exercise_id in cursor.fetchall():
        exercise_ids.setdefault(program_id, []).append(exercise_id)
    return exercise_ids


def _row_to_program(row, exercise_ids: list[UUID]) -> Program:
    """Convert a database row to a Program object."""
    id, program_type, program_name, created_at = row
    return Program(
        id=id,
        program_type=program_type,
        program_name=program_name,
        exercise=exercise_ids,
        created_at=created_at,
    )
