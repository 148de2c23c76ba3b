"""Registration, login and the authenticated user page."""

import logging
from uuid import UUID

import psycopg
from fastapi import APIRouter, Depends, status

from gymlog.app.auth import authenticate_user
from gymlog.app.constants import LOGIN_MISMATCH_MESSAGE, MIN_PASSWORD_LENGTH
from gymlog.app.dependencies import get_database
from gymlog.app.errors import ApiError
from gymlog.db.connection import Database
from gymlog.db.programs import get_user_with_programs
from gymlog.db.users import create_user, get_user_credentials
from gymlog.models.responses import (
    Envelope,
    ErrorEnvelope,
    LoginResponse,
    SessionInfo,
)
from gymlog.models.user import LoginRequest, RegisterRequest, User, UserWithPrograms
from gymlog.utils.security import generate_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["users"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}},
)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[SessionInfo],
)
def register(
    request: RegisterRequest,
    db: Database = Depends(get_database),
) -> Envelope[SessionInfo]:
    """Create an account and issue its access token."""
    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise ApiError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            "validation_error",
        )

    user = create_user(
        db,
        username=request.username,
        password_hash=hash_password(request.password),
        access_token=generate_access_token(),
    )
    session = SessionInfo(
        username=user.username, access_token=user.access_token, user_id=user.id
    )
    return Envelope(response=session)


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Database = Depends(get_database),
) -> LoginResponse:
    """Exchange username and password for the user's access token."""
    credentials = get_user_credentials(db, request.username)
    if credentials is None or not verify_password(
        request.password, credentials.password_hash
    ):
        logger.info(f"Failed login for username {request.username!r}")
        raise ApiError(LOGIN_MISMATCH_MESSAGE, "invalid_credentials")

    user = credentials.user
    session = SessionInfo(
        username=user.username, access_token=user.access_token, user_id=user.id
    )
    return LoginResponse.from_session(session)


@router.get("/mypage/{user_id}", response_model=Envelope[UserWithPrograms])
def read_my_page(
    user_id: UUID,
    db: Database = Depends(get_database),
    _user: User = Depends(authenticate_user),
) -> Envelope[UserWithPrograms]:
    """Get a user with its programs expanded.

    Requires a valid access token; any registered user's token is accepted.
    """
    try:
        user = get_user_with_programs(db, user_id)
    except psycopg.Error as e:
        logger.exception(f"Failed to load programs for user id={user_id}")
        raise ApiError("Could not get programs", "database_error") from e

    if user is None:
        raise ApiError("Could not get programs", "not_found")
    return Envelope(response=user)
