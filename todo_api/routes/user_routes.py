from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from todo_api.auth.dependencies import get_current_user
from todo_api.auth.errors import Unauthenticated
from todo_api.auth.service import Identity
from todo_api.auth.store import UserStore
from todo_api.database import get_db
from todo_api.models.user import USER_FIELD_LENGTH

router = APIRouter(tags=['users'])

MAX_PHONE_NUMBER_LENGTH = 32


class IdentityResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str


class ProfileResponse(IdentityResponse):
    phone_number: str | None = None


class UpdateProfileRequest(BaseModel):
    name: str | None = None
    phone_number: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str | None) -> str:
        normalized = (value or '').strip()
        if not normalized:
            raise ValueError('Name cannot be blank.')
        if len(normalized) > USER_FIELD_LENGTH:
            raise ValueError(f'Name must be {USER_FIELD_LENGTH} characters or fewer.')
        return normalized

    @field_validator('phone_number')
    @classmethod
    def validate_phone_number(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        if not normalized:
            return None
        if len(normalized) > MAX_PHONE_NUMBER_LENGTH:
            raise ValueError(f'Phone number must be {MAX_PHONE_NUMBER_LENGTH} characters or fewer.')
        return normalized


@router.get('/me', response_model=IdentityResponse)
def me(current_user: Identity = Depends(get_current_user)):
    return current_user


@router.patch('/me', response_model=ProfileResponse)
def update_me(
    payload: UpdateProfileRequest,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    store = UserStore(db)
    user = store.find_by_id(current_user.id)
    if user is None:
        raise Unauthenticated('User not found')

    changes = payload.model_dump(exclude_unset=True)
    if changes:
        user = store.update(user, **changes)

    return ProfileResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=Identity.from_user(user).role,
        phone_number=user.phone_number,
    )
