"""Application layer services."""

from fiqhqa.application.services.authentication_service import (
    AuthenticationService,
)
from fiqhqa.application.services.user_service import UserService

__all__ = [
    "AuthenticationService",
    "UserService",
]
