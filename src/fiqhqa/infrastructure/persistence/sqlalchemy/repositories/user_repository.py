"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fiqhqa.domain.shared.time import as_utc
from fiqhqa.domain.user import (
    User,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    Username,
)
from fiqhqa.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error).lower()
    return "unique" in text or "duplicate" in text


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Works on a session owned by a unit of work. It flushes so that
    constraint violations surface immediately, but never commits.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int, lock: bool = False) -> User | None:
        model = await self._find_model_by_id(user_id, lock=lock)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_username(self, username: Union[str, Username]) -> User | None:
        value = (
            username.value
            if isinstance(username, Username)
            else Username(username).value
        )

        stmt = select(UserModel).where(UserModel.username == value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def add(self, user: User) -> User:
        model = self._map_to_model(user)
        self._session.add(model)
        await self._flush(user)

        user.assign_id(model.id)
        logger.info("Created user: %s", user.id)
        return user

    async def update(self, user: User) -> None:
        if user.id is None:
            msg = "Cannot update a user that was never persisted"
            raise ValueError(msg)

        model = await self._find_model_by_id(user.id)
        if model is None:
            raise UserNotFoundError(user.id)

        self._update_model(model, user)
        await self._flush(user)

        logger.debug("Updated user: %s", user.id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _flush(self, user: User) -> None:
        """Flush pending writes, reporting a taken username as a conflict."""
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise UsernameAlreadyExistsError(user.username) from e
            raise

    async def _find_model_by_id(
        self,
        user_id: int,
        lock: bool = False,
    ) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            name=model.name,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            username=user.username,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.username = user.username
        model.name = user.name
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
