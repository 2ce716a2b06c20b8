"""Data classes shared by the authentication services."""

from dataclasses import dataclass
from datetime import datetime

ACCESS_TOKEN_TYPE = "access"  # NOQA: S105


@dataclass(frozen=True)
class TokenPayload:
    """Decoded claims of a verified access token."""

    user_id: int
    exp: datetime
    issued_at: datetime
    token_type: str = ACCESS_TOKEN_TYPE

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN_TYPE
