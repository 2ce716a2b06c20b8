"""In-memory persistence for tests and database-less runs."""

from fiqhqa.infrastructure.persistence.memory.unit_of_work import (
    InMemoryTransactionManager,
    InMemoryUnitOfWork,
)
from fiqhqa.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
    InMemoryUserStore,
)

__all__ = [
    "InMemoryTransactionManager",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryUserStore",
]
