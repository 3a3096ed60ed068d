"""User schemas and the two user-facing projections (view / edit)."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

NAME_PATTERN = r"^[A-Za-z]+$"
PHONE_PATTERN = r"^[0-9\-]+$"


class UserCreate(BaseModel):
    first_name: str = Field(pattern=NAME_PATTERN)
    last_name: str = Field(pattern=NAME_PATTERN)
    phone_number: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)


class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, pattern=NAME_PATTERN)
    last_name: Optional[str] = Field(default=None, pattern=NAME_PATTERN)
    phone_number: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=8, max_length=100)


class UserView(BaseModel):
    """What other users get to see: no password hash, one display name."""

    id: UUID
    full_name: str
    email: str
    phone_number: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_user(cls, user) -> "UserView":
        return cls.model_validate(user)


class UserEditView(BaseModel):
    """Editable fields. ``password`` is the stored hash, never the plaintext."""

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str]
    password: str
    created_at: datetime

    @classmethod
    def from_user(cls, user) -> "UserEditView":
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone_number=user.phone_number,
            password=user.password_hash,
            created_at=user.created_at,
        )


class UserSummary(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    workspace_id: Optional[UUID] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    session_id: UUID
    user: UserView
