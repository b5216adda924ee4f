"""SQLAlchemy-backed lookup and persistence of user records."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todo_api.auth.errors import DuplicateUser
from todo_api.models.user import User, UserRole

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "phone_number", "role"})


class UserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def insert(self, name: str, email: str, password_hash: str, role: UserRole = UserRole.USER) -> User:
        user = User(name=name, email=email, hashed_password=password_hash, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            # Only the unique index on email means a registration raced past the lookup.
            if self.find_by_email(email) is None:
                raise
            logger.info("Rejected duplicate insert for %s", email)
            raise DuplicateUser() from exc
        self.db.refresh(user)
        return user

    def update(self, user: User, **changes) -> User:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update user fields: {', '.join(sorted(unknown))}")

        for field, value in changes.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()
