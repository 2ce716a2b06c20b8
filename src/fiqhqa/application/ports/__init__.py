"""Application layer ports (aka interfaces)."""

from fiqhqa.application.ports.transaction_manager import (
    TransactionManager,
    UnitOfWork,
)

__all__ = [
    "TransactionManager",
    "UnitOfWork",
]
