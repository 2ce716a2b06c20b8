"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, Field

from fiqhqa.presentation.api.schemas.users import UserResponse


class LoginRequest(BaseModel):
    """Request schema for user login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "amina",
                "password": "secret1",
            },
        },
    )


class LoginResponse(BaseModel):
    """Access token plus the public fields of the logged-in user."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
