"""
Registration, login and request-time identity resolution.

``AuthService`` is built per request around a ``UserStore`` and the
process-wide ``AuthSettings``. It refuses to exist without a signing
secret, so a misconfigured process fails before serving anything.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

import jwt

from todo_api.auth import jwt_handler
from todo_api.auth.errors import DuplicateUser, InvalidCredentials, Unauthenticated
from todo_api.auth.password import dummy_password_hash, hash_password, verify_password
from todo_api.auth.store import UserStore
from todo_api.core.config import AuthSettings, ConfigurationError
from todo_api.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(id=user.id, name=user.name, email=user.email, role=_role_value(user.role))


def _role_value(role) -> str:
    return getattr(role, "value", role)


def authorize(identity: Identity, required_roles: Iterable[str]) -> bool:
    """Flat membership check; an empty requirement admits everyone."""
    roles = {_role_value(role) for role in required_roles}
    return not roles or identity.role in roles


class AuthService:
    def __init__(self, store: UserStore, settings: AuthSettings) -> None:
        if not settings.jwt_secret:
            raise ConfigurationError("JWT_SECRET is not defined in the configuration")
        self.store = store
        self.settings = settings

    def register(self, name: str, email: str, password: str) -> dict:
        if self.store.find_by_email(email) is not None:
            raise DuplicateUser()

        user = self.store.insert(name=name, email=email, password_hash=hash_password(password))
        logger.info("Registered user %s (%s)", user.id, user.email)

        return {
            "success": True,
            "message": "User registered successfully",
            "user": {"id": user.id, "email": user.email},
        }

    def login(self, email: str, password: str) -> dict:
        user = self.store.find_by_email(email)
        if user is None:
            # Unknown emails cost the same bcrypt work as a wrong password.
            verify_password(password, dummy_password_hash())
            logger.warning("Rejected login for %s", email)
            raise InvalidCredentials()
        if not verify_password(password, user.hashed_password):
            logger.warning("Rejected login for %s", email)
            raise InvalidCredentials()

        token = jwt_handler.create_access_token(subject=user.id, email=user.email, settings=self.settings)
        logger.info("Login: %s (%s)", user.id, user.email)
        return {"access_token": token, "token_type": "bearer"}

    def resolve_identity(self, token: str) -> Identity:
        try:
            payload = jwt_handler.decode_access_token(token, self.settings)
        except jwt.ExpiredSignatureError as exc:
            raise Unauthenticated("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise Unauthenticated("Invalid token") from exc

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError) as exc:
            raise Unauthenticated("Invalid token subject") from exc

        user = self.store.find_by_id(user_id)
        if user is None:
            raise Unauthenticated("User not found")
        return Identity.from_user(user)
