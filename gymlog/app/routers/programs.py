"""Program creation and lookup."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from gymlog.app.dependencies import get_database
from gymlog.db.connection import Database
from gymlog.db.errors import RecordNotFoundError
from gymlog.db.exercises import get_program_with_exercises
from gymlog.db.programs import create_program_for_user
from gymlog.models.program import ProgramCreate, ProgramWithExercises
from gymlog.models.responses import Envelope, ErrorEnvelope
from gymlog.models.user import User

router = APIRouter(
    tags=["programs"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}},
)


@router.post(
    "/program/{user_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[User],
)
def create_program(
    user_id: UUID,
    request: ProgramCreate,
    db: Database = Depends(get_database),
) -> Envelope[User]:
    """Create a program and add it to the user's program list.

    Returns the user as it is after the program was added.
    """
    user = create_program_for_user(db, user_id, request)
    return Envelope(response=user)


@router.get("/myprogram/{program_id}", response_model=Envelope[ProgramWithExercises])
def read_program(
    program_id: UUID,
    db: Database = Depends(get_database),
) -> Envelope[ProgramWithExercises]:
    """Get a program with its exercises expanded."""
    program = get_program_with_exercises(db, program_id)
    if program is None:
        raise RecordNotFoundError(f"Program {program_id} not found")
    return Envelope(response=program)
