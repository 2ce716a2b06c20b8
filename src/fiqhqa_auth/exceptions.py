"""Authentication exceptions.

These exceptions are raised by the fiqhqa_auth package and carry the
error kinds of the shared domain taxonomy, so the presentation layer
maps them like any other core error.
"""

from fiqhqa.domain.shared.exceptions import DomainException, ErrorCode


class AuthError(DomainException):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthError):
    """Raised when an access token cannot be accepted."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class MalformedTokenError(InvalidTokenError):
    """Raised when a token is structurally invalid or has bad claims."""

    def __init__(self, message: str = "Malformed token"):
        super().__init__(message)


class InvalidSignatureError(InvalidTokenError):
    """Raised when a token signature does not match (tampered or wrong key)."""

    def __init__(self, message: str = "Token signature verification failed"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class MissingTokenError(AuthError):
    """Raised when no bearer token accompanies a protected request."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.BAD_REQUEST)


class InvalidCredentialsError(AuthError):
    """Raised when username or password is incorrect.

    Login never tells unknown usernames and wrong passwords apart.
    """

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)
