"""Password hashing and access-token generation."""

import secrets

from werkzeug.security import check_password_hash, generate_password_hash

# 128 random bytes, hex encoded: 256 characters.
ACCESS_TOKEN_BYTES = 128


def generate_access_token() -> str:
    """Generate an opaque bearer token for a new user."""
    return secrets.token_hex(ACCESS_TOKEN_BYTES)


def hash_password(password: str) -> str:
    """Hash a raw password with a random salt."""
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a raw password against a stored hash."""
    return check_password_hash(password_hash, password)
