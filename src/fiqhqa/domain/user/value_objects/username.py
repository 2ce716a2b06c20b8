"""Username value object.

Provides validated, normalized handles for user identification.
"""

import re
from dataclasses import dataclass

from fiqhqa.domain.user.exceptions import InvalidUsernameError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 32
USERNAME_PATTERN = re.compile(r"^[a-z0-9_.-]+$")


@dataclass(frozen=True)
class Username:
    """Value object representing a validated username."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Username cannot be empty"
            raise InvalidUsernameError(msg)

        normalized = self.value.strip().lower()

        if not USERNAME_MIN_LENGTH <= len(normalized) <= USERNAME_MAX_LENGTH:
            msg = (
                f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} "
                "characters"
            )
            raise InvalidUsernameError(msg)

        if not USERNAME_PATTERN.match(normalized):
            msg = f"Invalid username format: {self.value}"
            raise InvalidUsernameError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Username('{self.value}')"
