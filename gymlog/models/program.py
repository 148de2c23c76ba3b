"""Workout program models."""

from __future__ import annotations
from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exercise import Exercise

ProgramType = Literal["weights", "cardio"]

PROGRAM_NAME_MIN_LENGTH = 5
PROGRAM_NAME_MAX_LENGTH = 20


class Program(BaseModel):
    """A workout program as stored, with exercises as references."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    program_type: ProgramType = Field(alias="programType")
    program_name: str = Field(alias="programName")
    exercise: list[UUID] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")


class ProgramWithExercises(Program):
    """A program with its exercise references expanded one level."""

    exercise: list[Exercise] = Field(default_factory=list)  # type: ignore[assignment]


class ProgramCreate(BaseModel):
    """Request body for POST /program/{user_id}."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    program_type: ProgramType = Field(alias="programType")
    program_name: str = Field(
        alias="programName",
        min_length=PROGRAM_NAME_MIN_LENGTH,
        max_length=PROGRAM_NAME_MAX_LENGTH,
    )

    @field_validator("program_type", mode="before")
    @classmethod
    def normalize_program_type(cls, value: Any) -> Any:
        """Accept "Weights" or " cardio " the same way as their canonical form."""
        if isinstance(value, str):
            return value.strip().lower()
        return value
