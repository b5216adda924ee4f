"""Task model definitions."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from todo_api.database import Base
from todo_api.models.user import utcnow


class Task(Base):
    """A to-do item owned by exactly one user."""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    name = Column(String(191), nullable=False)
    description = Column(String(191), nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
