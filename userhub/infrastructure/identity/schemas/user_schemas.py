"""Pydantic schemas for user endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from userhub.application.identity.use_cases.dtos.user_dtos import UserDTO


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: str
    age: int | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, user: UserDTO) -> "UserResponse":
        return cls.model_validate(user)


class UserCreateRequest(BaseModel):
    """Schema for creating a user as an administrator."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    age: int | None = Field(None, ge=0, le=150)
    role: str | None = None
    password: str | None = Field(None, min_length=8, max_length=128)


class UserUpdateRequest(BaseModel):
    """Schema for a partial user update; omitted fields stay unchanged."""

    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255)
    age: int | None = Field(None, ge=0, le=150)
    role: str | None = None
