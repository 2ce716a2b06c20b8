"""User aggregate for account identity and credentials."""

from datetime import datetime
from typing import Optional, Union

from fiqhqa.domain.shared.time import utc_now
from fiqhqa.domain.user.exceptions import InvalidDisplayNameError
from fiqhqa.domain.user.value_objects import Username

DISPLAY_NAME_MAX_LENGTH = 100


def _normalize_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    name = name.strip()
    if not name:
        return None
    if len(name) > DISPLAY_NAME_MAX_LENGTH:
        msg = f"Name cannot exceed {DISPLAY_NAME_MAX_LENGTH} characters"
        raise InvalidDisplayNameError(msg)
    return name


class User:
    """
    User aggregate root.

    The id is assigned by storage when the user is first persisted and
    never changes afterwards. The password hash is opaque to the aggregate;
    hashing and verification live in the password hashing service.
    """

    def __init__(
        self,
        username: Union[str, Username],
        password_hash: str,
        name: Optional[str] = None,
        id: Optional[int] = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._username = (
            username if isinstance(username, Username) else Username(username)
        )
        self._password_hash = password_hash
        self._name = _normalize_name(name)
        self._id = id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def username(self) -> str:
        return self._username.value

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, user_id: int) -> None:
        if self._id is not None and self._id != user_id:
            msg = f"User already has id {self._id}"
            raise ValueError(msg)
        self._id = user_id

    def rename(self, username: Union[str, Username]) -> None:
        new_username = (
            username if isinstance(username, Username) else Username(username)
        )
        if new_username != self._username:
            self._username = new_username
            self._touch()

    def change_name(self, name: Optional[str]) -> None:
        new_name = _normalize_name(name)
        if new_name != self._name:
            self._name = new_name
            self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: Union[str, Username],
        password_hash: str,
        name: Optional[str] = None,
    ) -> "User":
        return cls(username=username, password_hash=password_hash, name=name)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        username: Union[str, Username],
        password_hash: str,
        name: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            password_hash=password_hash,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def copy(self) -> "User":
        return User(
            id=self._id,
            username=self._username,
            password_hash=self._password_hash,
            name=self._name,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username.value})"
