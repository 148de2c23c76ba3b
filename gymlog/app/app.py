# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gymlog.db.connection import Database
from .errors import register_error_handlers
from .routers import meta_router, users_router, programs_router, exercises_router

"""FastAPI application setup for the gymlog API.

Exposes registration/login, program and exercise creation, and read routes
that expand user -> program -> exercise references. This module configures
CORS, logging behavior, error envelopes, and the database handle.
"""

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail startup if the database can't be reached."""
    database: Database = app.state.database
    database.check_connection()
    yield


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application around a database handle.

    Args:
        database: Handle used by every route. Defaults to one built from
            DATABASE_URL.
    """
    app = FastAPI(title="gymlog", lifespan=lifespan)
    app.state.database = database if database is not None else Database.from_env()

    app.include_router(meta_router)
    app.include_router(users_router)
    app.include_router(programs_router)
    app.include_router(exercises_router)
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    return app


# Configure basic logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# Configure the logging for the API itself if the user specifies it.
if "LOG_LEVEL" in os.environ:
    match os.environ["LOG_LEVEL"].upper():
        case "DEBUG":
            log_level = logging.DEBUG
        case "INFO":
            log_level = logging.INFO
        case "WARNING":
            log_level = logging.WARNING
        case "ERROR":
            log_level = logging.ERROR
        case "CRITICAL":
            log_level = logging.CRITICAL
        case _:
            raise ValueError(f"Invalid log level: {os.environ['LOG_LEVEL']}")
    logging.getLogger("gymlog").setLevel(log_level)


app = create_app()
