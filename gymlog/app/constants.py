"""Defaults for server settings and account rules."""

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"

MIN_PASSWORD_LENGTH = 8

LOGIN_MISMATCH_MESSAGE = "Sorry, username and password don't match"
UNAUTHORIZED_MESSAGE = "Please log in"
