"""Shared API response models.

Every endpoint answers with the `{"response": ..., "success": ...}` envelope.
Failures are produced by the error handlers in `gymlog.app.errors` and add an
`errorCode` field.
"""

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Successful response wrapper."""

    response: T
    success: bool = True


class ErrorEnvelope(BaseModel):
    """Failure response wrapper."""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    success: bool = False
    error_code: str = Field(alias="errorCode")


class SessionInfo(BaseModel):
    """Credentials handed back on registration and login."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    access_token: str = Field(alias="accessToken")
    user_id: UUID = Field(alias="userId")


class LoginResponse(Envelope[SessionInfo]):
    """Login envelope.

    Carries the session both nested under `response` and flattened next to
    `success`, which is where older clients read it from.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str
    access_token: str = Field(alias="accessToken")
    user_id: UUID = Field(alias="userId")

    @classmethod
    def from_session(cls, session: SessionInfo) -> "LoginResponse":
        return cls(
            response=session,
            username=session.username,
            access_token=session.access_token,
            user_id=session.user_id,
        )
