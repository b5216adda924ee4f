from datetime import datetime, timedelta, timezone

import jwt

from todo_api.core.config import AuthSettings


def create_access_token(
    subject: int | str,
    email: str,
    settings: AuthSettings,
    expires_delta: timedelta | None = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else settings.jwt_expires_in)
    payload = {"sub": str(subject), "email": email, "iat": now, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: AuthSettings) -> dict:
    """Verify signature and expiry; raises ``jwt.InvalidTokenError`` on any failure."""
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["exp", "sub"]},
    )
