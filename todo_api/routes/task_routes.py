from datetime import datetime

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.orm import Session

from todo_api.auth.dependencies import get_current_user, require_roles
from todo_api.auth.service import Identity
from todo_api.database import get_db
from todo_api.models.task import Task
from todo_api.models.user import UserRole

router = APIRouter(tags=['tasks'])

MAX_TASK_FIELD_LENGTH = 191


class CreateTaskRequest(BaseModel):
    name: str
    description: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Task name is required.')
        if len(normalized) > MAX_TASK_FIELD_LENGTH:
            raise ValueError(f'Task name must be {MAX_TASK_FIELD_LENGTH} characters or fewer.')
        return normalized

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        if not normalized:
            return None
        if len(normalized) > MAX_TASK_FIELD_LENGTH:
            raise ValueError(f'Description must be {MAX_TASK_FIELD_LENGTH} characters or fewer.')
        return normalized


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    is_completed: bool
    user_id: int
    created_at: datetime
    updated_at: datetime


@router.post('', status_code=status.HTTP_201_CREATED, response_model=TaskResponse)
def create_task(
    payload: CreateTaskRequest,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task = Task(name=payload.name, description=payload.description, user_id=current_user.id)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


@router.get('', response_model=list[TaskResponse])
def list_my_tasks(current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    return (
        db.query(Task)
        .filter(Task.user_id == current_user.id)
        .order_by(Task.created_at.asc(), Task.id.asc())
        .all()
    )


@router.get('/all', response_model=list[TaskResponse])
def list_all_tasks(
    _admin: Identity = Depends(require_roles(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    return db.query(Task).order_by(Task.id.asc()).all()
