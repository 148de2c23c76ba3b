"""Translate failures into the `{"response", "success", "errorCode"}` envelope.

Every failure is answered with HTTP 400 except authentication failures (401).
Handlers are registered on the app by `register_error_handlers`.
"""

import logging
from typing import Literal

import psycopg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gymlog.db.errors import DuplicateRecordError, RecordNotFoundError
from gymlog.models.responses import ErrorEnvelope

logger = logging.getLogger(__name__)

ErrorCode = Literal[
    "validation_error",
    "duplicate",
    "not_found",
    "invalid_credentials",
    "unauthorized",
    "database_error",
]


class ApiError(Exception):
    """An expected failure that should reach the client as an error envelope."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code


def error_response(
    message: str,
    error_code: ErrorCode,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    body = ErrorEnvelope(response=message, error_code=error_code)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(by_alias=True)
    )


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic's error list into one readable line.

    Example: "programName: String should have at least 5 characters".
    """
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts) or "Invalid request"


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.message, exc.error_code, exc.status_code)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = describe_validation_errors(exc)
    logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
    return error_response(message, "validation_error")


async def handle_not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return error_response(str(exc), "not_found")


async def handle_duplicate(request: Request, exc: DuplicateRecordError) -> JSONResponse:
    return error_response(str(exc), "duplicate")


async def handle_integrity_error(
    request: Request, exc: psycopg.IntegrityError
) -> JSONResponse:
    # CHECK / NOT NULL violations that slipped past request validation.
    logger.warning(f"Constraint violation on {request.url.path}: {exc}")
    return error_response("Record failed validation", "validation_error")


async def handle_database_error(request: Request, exc: psycopg.Error) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return error_response("Database error", "database_error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, handle_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(RecordNotFoundError, handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(DuplicateRecordError, handle_duplicate)  # type: ignore[arg-type]
    app.add_exception_handler(psycopg.IntegrityError, handle_integrity_error)  # type: ignore[arg-type]
    app.add_exception_handler(psycopg.Error, handle_database_error)  # type: ignore[arg-type]
