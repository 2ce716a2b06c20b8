"""User service for account creation and profile management."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fiqhqa.application.dtos import (
    AddUserCommand,
    ChangePasswordCommand,
    UpdateUserCommand,
)
from fiqhqa.domain.user import User, Username, UserNotFoundError
from fiqhqa_auth import InvalidCredentialsError, PasswordHashingService

if TYPE_CHECKING:
    from fiqhqa.application.context import RequestInfo
    from fiqhqa.application.ports import TransactionManager, UnitOfWork

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user accounts.

    Every mutation runs inside exactly one transaction scope, so it either
    commits completely or leaves storage untouched.
    """

    def __init__(
        self,
        transaction_manager: TransactionManager,
        password_service: PasswordHashingService,
    ):
        self._tx = transaction_manager
        self._password_service = password_service

    async def add(self, info: RequestInfo, command: AddUserCommand) -> User:
        """Register a new user.

        Raises
        ------
        WeakPasswordError
            If the password doesn't meet requirements
        InvalidUsernameError
            If the username has an invalid shape
        UsernameAlreadyExistsError
            If the username is already taken
        """
        username = Username(command.username)
        self._password_service.validate_strength(command.password)
        password_hash = await asyncio.to_thread(
            self._password_service.hash,
            command.password,
        )
        user = User.create(
            username=username,
            password_hash=password_hash,
            name=command.name,
        )

        async with self._tx.transaction() as uow:
            user = await uow.users.add(user)

        logger.info("[%s] User registered: %s", info.trace_id, user.id)
        return user

    async def update(self, info: RequestInfo, command: UpdateUserCommand) -> User:
        """Apply profile changes. Password and id are never touched here."""
        async with self._tx.transaction() as uow:
            user = await self._load(uow, command.id)

            if command.username is not None:
                user.rename(command.username)
            if command.name is not None:
                user.change_name(command.name)

            await uow.users.update(user)

        logger.info("[%s] User updated: %s", info.trace_id, user.id)
        return user

    async def change_password(
        self,
        info: RequestInfo,
        command: ChangePasswordCommand,
    ) -> None:
        """Replace the password after verifying the current one.

        The check and the write share one transaction; the row is locked
        for the duration where the storage engine supports it.
        """
        self._password_service.validate_strength(command.new_password)

        async with self._tx.transaction() as uow:
            user = await self._load(uow, command.id, lock=True)

            matches = await asyncio.to_thread(
                self._password_service.verify,
                command.current_password,
                user.password_hash,
            )
            if not matches:
                logger.info(
                    "[%s] Password change rejected for user %s",
                    info.trace_id,
                    user.id,
                )
                msg = "Current password is incorrect"
                raise InvalidCredentialsError(msg)

            new_hash = await asyncio.to_thread(
                self._password_service.hash,
                command.new_password,
            )
            user.change_password_hash(new_hash)
            await uow.users.update(user)

        logger.info("[%s] Password changed for user %s", info.trace_id, user.id)

    async def get_by_id(self, info: RequestInfo, user_id: int) -> User:
        async with self._tx.transaction() as uow:
            user = await self._load(uow, user_id)

        logger.debug("[%s] Loaded user %s", info.trace_id, user_id)
        return user

    async def _load(self, uow: UnitOfWork, user_id: int, lock: bool = False) -> User:
        user = await uow.users.find_by_id(user_id, lock=lock)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
