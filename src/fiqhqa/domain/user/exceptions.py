"""Errors raised by the user aggregate and its repository."""

from fiqhqa.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class InvalidUsernameError(ValidationError):
    pass


class InvalidDisplayNameError(ValidationError):
    pass


class UsernameAlreadyExistsError(ConflictError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            f"Username already registered: {username}",
            details={"username": username},
        )


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}", details={"user_id": user_id})
