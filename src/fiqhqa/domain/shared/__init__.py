"""Shared domain building blocks."""

from fiqhqa.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StorageError,
    ValidationError,
)
from fiqhqa.domain.shared.time import as_utc, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StorageError",
    "ValidationError",
    "as_utc",
    "utc_now",
]
