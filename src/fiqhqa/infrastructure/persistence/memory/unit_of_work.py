"""In-memory unit of work and transaction manager."""

from __future__ import annotations

import logging
from typing import Optional

from fiqhqa.application.ports import TransactionManager, UnitOfWork
from fiqhqa.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
    InMemoryUserStore,
)

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """Serializable unit of work over an InMemoryUserStore.

    Holds the store lock for the whole scope, so transactions never
    interleave. On failure the store is restored to its state at enter.
    """

    def __init__(self, store: InMemoryUserStore) -> None:
        self._store = store
        self._snapshot: Optional[tuple] = None
        self._active = False

    async def __aenter__(self) -> InMemoryUnitOfWork:
        if self._active:
            msg = "UnitOfWork is already active"
            raise RuntimeError(msg)
        await self._store.lock.acquire()
        self._active = True
        self._snapshot = self._store.snapshot()
        self.users = InMemoryUserRepository(self._store)
        logger.debug("uow: memory scope opened")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if exc is not None:
                logger.debug("uow: rollback due to %s", exc_type.__name__)
                self._store.restore(self._snapshot)
            else:
                logger.debug("uow: committed")
        finally:
            self._snapshot = None
            self._active = False
            del self.users
            self._store.lock.release()


class InMemoryTransactionManager(TransactionManager):
    """Transaction manager backed by a process-local store."""

    def __init__(self, store: Optional[InMemoryUserStore] = None) -> None:
        self.store = store or InMemoryUserStore()

    def transaction(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self.store)
