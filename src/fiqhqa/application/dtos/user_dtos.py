"""Commands and results exchanged with the user and auth services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fiqhqa.domain.user import User


@dataclass(frozen=True)
class LoginCommand:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"LoginCommand(username={self.username!r})"


@dataclass(frozen=True)
class AddUserCommand:
    username: str
    password: str
    name: Optional[str] = None

    def __repr__(self) -> str:
        return f"AddUserCommand(username={self.username!r}, name={self.name!r})"


@dataclass(frozen=True)
class UpdateUserCommand:
    """Profile changes for one user. ``None`` leaves a field untouched."""

    id: int
    username: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class ChangePasswordCommand:
    id: int
    current_password: str
    new_password: str

    def __repr__(self) -> str:
        return f"ChangePasswordCommand(id={self.id})"


@dataclass(frozen=True)
class LoginResult:
    user: User
    access_token: str
    expires_in: int
    token_type: str = "bearer"  # NOQA: S105
