"""
Password hashing and verification.

bcrypt salts every hash on its own; the cost factor comes from
``BCRYPT_ROUNDS``.
"""

import secrets
from functools import lru_cache

import bcrypt

from todo_api.core import config

BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """A hash of a random throwaway password, checked when no account matches."""
    return hash_password(secrets.token_urlsafe(16))
