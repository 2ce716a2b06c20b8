"""In-memory implementation of UserRepository.

Used by tests and local runs without a database. Rows are stored as
private copies so callers only change storage through ``add``/``update``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from fiqhqa.domain.user import (
    User,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    Username,
)

logger = logging.getLogger(__name__)


@dataclass
class InMemoryUserStore:
    """Process-local user table shared by all units of work."""

    rows: dict[int, User] = field(default_factory=dict)
    next_id: int = 1
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def snapshot(self) -> tuple[dict[int, User], int]:
        return {key: user.copy() for key, user in self.rows.items()}, self.next_id

    def restore(self, snapshot: tuple[dict[int, User], int]) -> None:
        self.rows, self.next_id = snapshot


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed repository bound to one unit of work."""

    def __init__(self, store: InMemoryUserStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: int, lock: bool = False) -> Optional[User]:
        user = self._store.rows.get(user_id)
        return user.copy() if user else None

    async def find_by_username(self, username: Union[str, Username]) -> Optional[User]:
        value = (
            username.value
            if isinstance(username, Username)
            else Username(username).value
        )
        for user in self._store.rows.values():
            if user.username == value:
                return user.copy()
        return None

    async def add(self, user: User) -> User:
        self._ensure_username_free(user.username)

        user.assign_id(self._store.next_id)
        self._store.next_id += 1
        self._store.rows[user.id] = user.copy()

        logger.info("Created user: %s", user.id)
        return user

    async def update(self, user: User) -> None:
        if user.id is None or user.id not in self._store.rows:
            raise UserNotFoundError(user.id)

        self._ensure_username_free(user.username, exclude_id=user.id)
        self._store.rows[user.id] = user.copy()
        logger.debug("Updated user: %s", user.id)

    async def count(self) -> int:
        return len(self._store.rows)

    def _ensure_username_free(
        self,
        username: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        for user in self._store.rows.values():
            if user.username == username and user.id != exclude_id:
                raise UsernameAlreadyExistsError(username)
