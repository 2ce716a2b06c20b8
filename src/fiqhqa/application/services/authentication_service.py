"""Authentication service for login and bearer-token verification."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from fiqhqa.application.dtos import LoginCommand, LoginResult
from fiqhqa.domain.user import InvalidUsernameError, User, Username
from fiqhqa_auth import (
    InvalidCredentialsError,
    JWTService,
    MissingTokenError,
    PasswordHashingService,
)

if TYPE_CHECKING:
    from fiqhqa.application.context import RequestInfo
    from fiqhqa.application.ports import TransactionManager

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"

# Verified against when the username is unknown, so both login failures
# cost one bcrypt check.
_TIMING_PLACEHOLDER_PASSWORD = "placeholder-password"  # NOQA: S105


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the password hashing and JWT services with the User
    domain to provide:
    - Login with username and password
    - Verification of bearer tokens on protected requests

    Login performs no writes. Unknown usernames and wrong passwords fail
    with the same InvalidCredentialsError.
    """

    def __init__(
        self,
        transaction_manager: TransactionManager,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._tx = transaction_manager
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._placeholder_hash: Optional[str] = None

    async def login(self, info: RequestInfo, command: LoginCommand) -> LoginResult:
        user = await self._find_user(command.username)

        if user is None:
            await asyncio.to_thread(self._verify_placeholder, command.password)
            logger.info("[%s] Login failed: unknown username", info.trace_id)
            raise InvalidCredentialsError

        matches = await asyncio.to_thread(
            self._password_service.verify,
            command.password,
            user.password_hash,
        )
        if not matches:
            logger.info("[%s] Login failed for user %s", info.trace_id, user.id)
            raise InvalidCredentialsError

        access_token = self._jwt_service.create_access_token(user_id=user.id)

        logger.info("[%s] User logged in: %s", info.trace_id, user.id)
        return LoginResult(
            user=user,
            access_token=access_token,
            expires_in=int(self._jwt_service.access_token_ttl.total_seconds()),
        )

    def verify_access_token(self, token: Optional[str]) -> int:
        """Resolve the user id carried by a bearer token.

        Accepts either the raw token or a full ``Authorization`` header
        value. Storage is never consulted, so a token stays valid until it
        expires even if its user has since changed.
        """
        if token is None or not token.strip():
            raise MissingTokenError

        token = token.strip()
        scheme, _, credentials = token.partition(" ")
        if scheme.lower() == BEARER_SCHEME:
            token = credentials.strip()
        if not token:
            raise MissingTokenError

        return self._jwt_service.verify_token(token).user_id

    async def _find_user(self, username: str) -> Optional[User]:
        try:
            normalized = Username(username)
        except InvalidUsernameError:
            return None

        async with self._tx.transaction() as uow:
            return await uow.users.find_by_username(normalized)

    def _verify_placeholder(self, password: str) -> bool:
        if self._placeholder_hash is None:
            self._placeholder_hash = self._password_service.hash(
                _TIMING_PLACEHOLDER_PASSWORD,
            )
        return self._password_service.verify(password, self._placeholder_hash)
