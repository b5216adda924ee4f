from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from todo_api.auth.dependencies import get_auth_service
from todo_api.auth.password import BCRYPT_MAX_PASSWORD_BYTES
from todo_api.auth.service import AuthService
from todo_api.models.user import USER_FIELD_LENGTH

router = APIRouter(tags=['auth'])

PASSWORD_MIN_LENGTH = 7
PASSWORD_MAX_LENGTH = 25


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Name is required.')
        if len(normalized) > USER_FIELD_LENGTH:
            raise ValueError(f'Name must be {USER_FIELD_LENGTH} characters or fewer.')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email_length(cls, value: str) -> str:
        if len(value) > USER_FIELD_LENGTH:
            raise ValueError(f'Email must be {USER_FIELD_LENGTH} characters or fewer.')
        return value

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, value: str) -> str:
        if len(value.encode('utf-8')) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f'Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes.')
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisteredUser(BaseModel):
    id: int
    email: str


class RegisterResponse(BaseModel):
    success: bool
    message: str
    user: RegisteredUser


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = 'bearer'


@router.post('/register', status_code=status.HTTP_201_CREATED, response_model=RegisterResponse)
def register(payload: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    return auth_service.register(name=payload.name, email=payload.email, password=payload.password)


@router.post('/login', response_model=TokenResponse)
def login(payload: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    return auth_service.login(email=payload.email, password=payload.password)
