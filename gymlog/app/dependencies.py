from fastapi import Request

from gymlog.db.connection import Database


def get_database(request: Request) -> Database:
    """The database handle the app was created with."""
    return request.app.state.database
