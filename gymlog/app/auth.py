"""Access-token authentication.

Clients send the token issued at registration verbatim in the Authorization
header. A token is valid for as long as the user record exists.
"""

import logging
from typing import Optional

import psycopg
from fastapi import Depends, Header, status

from gymlog.db.connection import Database
from gymlog.db.users import get_user_by_access_token
from gymlog.models.user import User
from .constants import UNAUTHORIZED_MESSAGE
from .dependencies import get_database
from .errors import ApiError

logger = logging.getLogger(__name__)


def extract_token(authorization: str) -> str:
    """Return the raw token, tolerating an optional "Bearer " prefix."""
    token = authorization.strip()
    if token[:7].lower() == "bearer ":
        token = token[7:].strip()
    return token


def authenticate_user(
    authorization: Optional[str] = Header(default=None),
    db: Database = Depends(get_database),
) -> User:
    """FastAPI dependency requiring a valid access token.

    Returns:
        The user the token belongs to.

    Raises:
        ApiError: 401 if the header is missing or matches no user,
            400 if the lookup itself fails.
    """
    if not authorization:
        raise ApiError(
            UNAUTHORIZED_MESSAGE, "unauthorized", status.HTTP_401_UNAUTHORIZED
        )

    try:
        user = get_user_by_access_token(db, extract_token(authorization))
    except psycopg.Error as e:
        logger.exception("Access token lookup failed")
        raise ApiError("Could not verify access token", "database_error") from e

    if user is None:
        logger.warning("Rejected request with unknown access token")
        raise ApiError(
            UNAUTHORIZED_MESSAGE, "unauthorized", status.HTTP_401_UNAUTHORIZED
        )
    return user
