"""User domain manages account identity and credentials.

This domain handles:
- User aggregate (id, username, display name, password hash)
- Username validation and normalization
- Repository interface for persistence
"""

from fiqhqa.domain.user.aggregates import User
from fiqhqa.domain.user.exceptions import (
    InvalidDisplayNameError,
    InvalidUsernameError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)
from fiqhqa.domain.user.repositories import UserRepository
from fiqhqa.domain.user.value_objects import Username

__all__ = [
    "InvalidDisplayNameError",
    "InvalidUsernameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "Username",
    "UsernameAlreadyExistsError",
]
