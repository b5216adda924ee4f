from typing import Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from todo_api.auth.errors import Forbidden, Unauthenticated
from todo_api.auth.service import AuthService, Identity, authorize
from todo_api.auth.store import UserStore
from todo_api.core.config import get_auth_settings
from todo_api.database import get_db
from todo_api.models.user import UserRole

security = HTTPBearer(auto_error=False)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserStore(db), get_auth_settings())


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthenticated("Missing bearer token")
    return auth_service.resolve_identity(credentials.credentials)


def require_roles(*roles: UserRole | str) -> Callable[..., Identity]:
    """Build a dependency that admits only identities holding one of ``roles``."""

    def _guard(current_user: Identity = Depends(get_current_user)) -> Identity:
        if not authorize(current_user, roles):
            raise Forbidden()
        return current_user

    return _guard
