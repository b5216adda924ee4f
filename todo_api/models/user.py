"""User model definitions."""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Integer, String

from todo_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


USER_FIELD_LENGTH = 191


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(Base):
    """Represents a registered account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(USER_FIELD_LENGTH), nullable=False)
    email = Column(String(USER_FIELD_LENGTH), unique=True, index=True, nullable=False)
    hashed_password = Column(String(USER_FIELD_LENGTH), nullable=False)
    phone_number = Column(String(USER_FIELD_LENGTH), nullable=True)
    role = Column(
        Enum(UserRole, values_callable=lambda roles: [role.value for role in roles], name="user_role"),
        nullable=False,
        default=UserRole.USER,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
