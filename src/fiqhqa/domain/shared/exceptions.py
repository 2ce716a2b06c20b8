"""Error kinds raised by the core.

Every failure a core operation reports is a ``DomainException`` tagged
with one ``ErrorCode``. Transports translate the code, never the class,
so new subclasses need no handler changes.
"""

from enum import Enum
from typing import Any, ClassVar, Optional


class ErrorCode(str, Enum):
    """Error kinds visible to API clients. Renaming one breaks clients."""

    BAD_REQUEST = "BAD_REQUEST"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL = "INTERNAL"


class DomainException(Exception):  # NOQA: N818
    """Root of the core error hierarchy.

    ``details`` is diagnostic context for logs. It is never part of a
    response body.
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.details:
            return f"<{name} {self.code.value}: {self.message!r} {self.details!r}>"
        return f"<{name} {self.code.value}: {self.message!r}>"


class ValidationError(DomainException):
    default_code = ErrorCode.BAD_REQUEST


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.NOT_FOUND


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT


class StorageError(DomainException):
    """The backing store failed; the operation's changes were discarded."""

    def __init__(
        self,
        message: str = "Storage failure",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)
