"""User schemas for request/response models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fiqhqa.domain.user import User


class AddUserRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=256)
    name: Optional[str] = Field(default=None, max_length=256)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "amina",
                "password": "secret1",
                "name": "Amina",
            },
        },
    )


class UpdateUserRequest(BaseModel):
    """Request schema for profile changes. Omitted fields stay unchanged."""

    username: Optional[str] = Field(default=None, min_length=1, max_length=64)
    name: Optional[str] = Field(default=None, max_length=256)


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the current user's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1, max_length=256)


class UserResponse(BaseModel):
    """Public user fields. The password hash is never exposed."""

    id: int
    username: str
    name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
