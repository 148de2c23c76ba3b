from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

Metric = Literal["set", "reps", "weights"]

EXERCISE_NAME_MIN_LENGTH = 5
EXERCISE_NAME_MAX_LENGTH = 20


class Exercise(BaseModel):
    """A single exercise belonging to one or more programs."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    exercise: str
    metrics: Metric


class ExerciseCreate(BaseModel):
    """Request body for POST /exercise/{program_id}."""

    model_config = ConfigDict(str_strip_whitespace=True)

    exercise: str = Field(
        min_length=EXERCISE_NAME_MIN_LENGTH, max_length=EXERCISE_NAME_MAX_LENGTH
    )
    metrics: Metric
