"""Pydantic schemas for API request/response models."""

from fiqhqa.presentation.api.schemas.auth import LoginRequest, LoginResponse
from fiqhqa.presentation.api.schemas.common import (
    ApiResponse,
    HealthResponse,
    ok,
)
from fiqhqa.presentation.api.schemas.users import (
    AddUserRequest,
    ChangePasswordRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "AddUserRequest",
    "ApiResponse",
    "ChangePasswordRequest",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "UpdateUserRequest",
    "UserResponse",
    "ok",
]
