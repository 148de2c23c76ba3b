"""Errors raised by the data-access layer.

Driver errors that mean something to callers are translated into these so
route handlers and error handlers don't need to know about psycopg.
"""


class RecordNotFoundError(LookupError):
    """A referenced user, program or exercise does not exist."""


class DuplicateRecordError(ValueError):
    """A unique field (username, program name) is already taken."""
