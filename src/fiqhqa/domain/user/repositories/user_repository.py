"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from fiqhqa.domain.user.aggregates.user import User
from fiqhqa.domain.user.value_objects import Username


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations are bound to a single unit of work; they never commit
    on their own.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int, lock: bool = False) -> Optional[User]:
        """Find a user by their ID.

        With ``lock`` the row is held until the surrounding transaction
        ends, where the storage engine supports row locks.
        """

    @abstractmethod
    async def find_by_username(self, username: Union[str, Username]) -> Optional[User]:
        """Find a user by their username."""

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user and assign its id.

        Raises UsernameAlreadyExistsError if the username is taken.
        """

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes to an existing user.

        Raises UserNotFoundError if the user no longer exists and
        UsernameAlreadyExistsError if the new username is taken.
        """

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
