"""User models and the request bodies for registration and login."""

from __future__ import annotations
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .program import Program


class User(BaseModel):
    """A registered user.

    The password hash is never part of this model; it only lives in the database
    and is read back through `gymlog.db.users.get_user_credentials`.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    username: str
    access_token: str = Field(alias="accessToken")
    program: list[UUID] = Field(default_factory=list)


class UserWithPrograms(User):
    """A user with its program references expanded one level."""

    program: list[Program] = Field(default_factory=list)  # type: ignore[assignment]


class RegisterRequest(BaseModel):
    """Request body for POST /register."""

    username: str = Field(min_length=1)
    # Minimum length is checked by the route so the message stays readable.
    password: str


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    username: str
    password: str
