"""Exercise creation."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from gymlog.app.dependencies import get_database
from gymlog.db.connection import Database
from gymlog.db.exercises import create_exercise_for_program
from gymlog.models.exercise import ExerciseCreate
from gymlog.models.program import Program
from gymlog.models.responses import Envelope, ErrorEnvelope

router = APIRouter(
    tags=["exercises"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}},
)


@router.post(
    "/exercise/{program_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[Program],
)
def create_exercise(
    program_id: UUID,
    request: ExerciseCreate,
    db: Database = Depends(get_database),
) -> Envelope[Program]:
    """Create an exercise and add it to the program's exercise list.

    Returns the program as it is after the exercise was added.
    """
    program = create_exercise_for_program(db, program_id, request)
    return Envelope(response=program)
