"""Client-facing authentication and authorization failures."""

from fastapi import HTTPException, status


class AuthError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Authentication failed"
    headers: dict[str, str] | None = None

    def __init__(self, detail: str | None = None) -> None:
        headers = type(self).headers
        super().__init__(
            status_code=type(self).status_code,
            detail=detail or type(self).detail,
            headers=dict(headers) if headers is not None else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.status_code == other.status_code
            and self.detail == other.detail
        )

    def __hash__(self) -> int:
        return hash((type(self), self.status_code, self.detail))


class DuplicateUser(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "User already exists"


class InvalidCredentials(AuthError):
    # Unknown email and wrong password must stay indistinguishable.
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid credentials"


class Unauthenticated(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Insufficient role"
