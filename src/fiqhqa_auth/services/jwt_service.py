"""HS256 access tokens.

A token carries the user id in ``sub`` plus ``type``, ``iat`` and ``exp``.
Nothing is stored server side: a token is good exactly while its
signature checks out and ``exp`` lies in the future.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from fiqhqa_auth.exceptions import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from fiqhqa_auth.schemas import ACCESS_TOKEN_TYPE, TokenPayload

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "type", "iat", "exp"]


def _timestamp(claims: dict[str, Any], name: str) -> datetime:
    return datetime.fromtimestamp(claims[name], tz=timezone.utc)


class JWTService:
    """Issues and checks access tokens signed with one shared secret.

    >>> service = JWTService(secret_key="change-me")
    >>> service.verify_token(service.create_access_token(user_id=1)).user_id
    1
    """

    def __init__(self, secret_key: str, access_token_expire_minutes: int = 60):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Shared HS256 signing secret. Must not be empty.
        access_token_expire_minutes
            Lifetime of issued tokens (default 60)
        """
        if not secret_key:
            raise ValueError("JWT secret key cannot be empty")

        self._secret_key = secret_key
        self._ttl = timedelta(minutes=access_token_expire_minutes)

    @property
    def access_token_ttl(self) -> timedelta:
        return self._ttl

    def create_access_token(
        self,
        user_id: int,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign an access token for a user.

        Parameters
        ----------
        user_id
            Id stored in the ``sub`` claim
        expires_delta
            Lifetime for this token only, instead of the configured TTL

        Returns
        -------
        The encoded token string
        """
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "type": ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._ttl),
        }
        return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check a token and decode its claims.

        Parameters
        ----------
        token
            The bare token, without a ``Bearer`` prefix

        Returns
        -------
        The decoded payload of a valid access token

        Raises
        ------
        TokenExpiredError
            If ``exp`` has passed
        InvalidSignatureError
            If the token was altered or signed with another key
        MalformedTokenError
            If the token cannot be decoded, lacks one of ``sub``, ``type``,
            ``iat`` or ``exp``, or is not an access token
        """
        claims = self._decode(token)

        token_type = claims["type"]
        if token_type != ACCESS_TOKEN_TYPE:
            raise MalformedTokenError(f"Unexpected token type: {token_type}")

        try:
            return TokenPayload(
                user_id=int(claims["sub"]),
                exp=_timestamp(claims, "exp"),
                issued_at=_timestamp(claims, "iat"),
                token_type=token_type,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedTokenError(f"Malformed token payload: {e}") from e

    def _decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError from e
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed token: {e}") from e
