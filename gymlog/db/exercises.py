"""Database operations for exercises."""

import logging
from typing import Optional
from uuid import UUID

from gymlog.models.exercise import Exercise, ExerciseCreate
from gymlog.models.program import Program, ProgramWithExercises
from .connection import Database
from .errors import RecordNotFoundError
from .programs import fetch_program_by_id

logger = logging.getLogger(__name__)


def create_exercise_for_program(
    db: Database, program_id: UUID, exercise: ExerciseCreate
) -> Program:
    """Create an exercise and append it to a program's exercise list.

    Runs as a single transaction and returns the program after the append.

    Raises:
        RecordNotFoundError: If the program does not exist.
    """
    with db.cursor() as cursor:
        cursor.execute(
            "SELECT id FROM programs WHERE id = %s FOR UPDATE", (program_id,)
        )
        if cursor.fetchone() is None:
            raise RecordNotFoundError(f"Program {program_id} not found")

        cursor.execute(
            """
            INSERT INTO exercises (exercise_name, metrics)
            VALUES (%s, %s)
            RETURNING id
            """,
            (exercise.exercise, exercise.metrics),
        )
        (exercise_id,) = cursor.fetchone()
        cursor.execute(
            "INSERT INTO program_exercises (program_id, exercise_id) VALUES (%s, %s)",
            (program_id, exercise_id),
        )
        program = fetch_program_by_id(cursor, program_id)

    logger.info(f"Created exercise id={exercise_id} in program id={program_id}")
    return program


def get_program_with_exercises(
    db: Database, program_id: UUID
) -> Optional[ProgramWithExercises]:
    """Get a program with its exercise references expanded one level."""
    with db.cursor() as cursor:
        program = fetch_program_by_id(cursor, program_id)
        if program is None:
            return None
        cursor.execute(
            """
            SELECT e.id, e.exercise_name, e.metrics
            FROM program_exercises pe
            JOIN exercises e ON e.id = pe.exercise_id
            WHERE pe.program_id = %s
            ORDER BY pe.id
            """,
            (program_id,),
        )
        exercises = [_row_to_exercise(row) for row in cursor.fetchall()]

    return ProgramWithExercises(
        id=program.id,
        program_type=program.program_type,
        program_name=program.program_name,
        exercise=exercises,
        created_at=program.created_at,
    )


def _row_to_exercise(row) -> Exercise:
    """Convert a database row to an Exercise object."""
    id, exercise_name, metrics = row
    return Exercise(id=id, exercise=exercise_name, metrics=metrics)
