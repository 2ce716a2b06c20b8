"""Data transfer objects for the application layer."""

from fiqhqa.application.dtos.user_dtos import (
    AddUserCommand,
    ChangePasswordCommand,
    LoginCommand,
    LoginResult,
    UpdateUserCommand,
)

__all__ = [
    "AddUserCommand",
    "ChangePasswordCommand",
    "LoginCommand",
    "LoginResult",
    "UpdateUserCommand",
]
