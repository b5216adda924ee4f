import os
import re
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the given environment."""


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./todo.db")

CORS_ORIGINS = _get_list(os.getenv("CORS_ORIGINS"), ["http://localhost:4200"])

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

MIN_PRODUCTION_SECRET_LENGTH = 32

# The signing key is a shared secret, so only the HMAC family applies.
SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration(value: str) -> timedelta:
    """Parse ``3600``, ``45s``, ``15m``, ``1h`` or ``7d`` into a timedelta."""
    match = _DURATION_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    duration = timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})
    if duration <= timedelta(0):
        raise ValueError(f"Duration must be positive: {value!r}")
    return duration


@dataclass(frozen=True)
class AuthSettings:
    jwt_secret: str
    jwt_expires_in: timedelta
    jwt_algorithm: str = "HS256"


def load_auth_settings(environ: Mapping[str, str] | None = None) -> AuthSettings:
    env = os.environ if environ is None else environ

    secret = env.get("JWT_SECRET", "").strip()
    if not secret:
        raise ConfigurationError("JWT_SECRET is not defined in the configuration")

    app_env = env.get("APP_ENV", APP_ENV).lower()
    if app_env == "production" and len(secret) < MIN_PRODUCTION_SECRET_LENGTH:
        raise ConfigurationError(
            f"JWT_SECRET must be at least {MIN_PRODUCTION_SECRET_LENGTH} characters in production."
        )

    raw_expires_in = env.get("JWT_EXPIRES_IN", "").strip()
    if not raw_expires_in:
        raise ConfigurationError("JWT_EXPIRES_IN is not defined in the configuration")
    try:
        expires_in = parse_duration(raw_expires_in)
    except ValueError as exc:
        raise ConfigurationError(f"JWT_EXPIRES_IN is invalid: {exc}") from exc

    algorithm = env.get("JWT_ALGORITHM", "HS256").strip().upper()
    if algorithm not in SUPPORTED_JWT_ALGORITHMS:
        raise ConfigurationError(
            f"JWT_ALGORITHM must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}, got {algorithm!r}"
        )

    return AuthSettings(
        jwt_secret=secret,
        jwt_expires_in=expires_in,
        jwt_algorithm=algorithm,
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    return load_auth_settings()
