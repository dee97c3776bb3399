"""User and auth schemas for request/response validation."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.category import CategoryResponse


class UserRegister(CamelModel):
    email: EmailStr
    password: str = Field(min_length=5, max_length=72)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class OAuthLogin(CamelModel):
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    oauth_id: str = Field(min_length=1, max_length=255)
    oauth_provider: str = Field(min_length=1, max_length=50)
    oauth_picture: str | None = Field(default=None, max_length=500)


class UserUpdate(CamelModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    password: str | None = Field(default=None, min_length=5, max_length=72)


class UserResponse(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    is_oauth: bool
    oauth_id: str | None = Field(default=None, validation_alias="oauth_uid", serialization_alias="oauthId")
    oauth_picture: str | None = None
    created_at: datetime


class UserDetailResponse(UserResponse):
    categories: list[CategoryResponse] = []


class UserEnvelope(CamelModel):
    user: UserResponse


class UserDetailEnvelope(CamelModel):
    user: UserDetailResponse


class UserListEnvelope(CamelModel):
    users: list[UserResponse]


class TokenResponse(CamelModel):
    token: str
    token_type: str = "bearer"


class DeletedResponse(CamelModel):
    deleted: int
