"""FiqhQA Auth - authentication primitives.

This package provides the credential and token machinery used by the
application services. It handles:
- Password hashing (bcrypt)
- Access token creation and verification (HS256 JWT)

Architecture:
    fiqhqa_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from fiqhqa_auth import PasswordHashingService, JWTService
"""

from fiqhqa_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
    TokenExpiredError,
    WeakPasswordError,
)
from fiqhqa_auth.schemas import TokenPayload
from fiqhqa_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidSignatureError",
    "InvalidTokenError",
    "MalformedTokenError",
    "MissingTokenError",
    "TokenExpiredError",
    "WeakPasswordError",
]
