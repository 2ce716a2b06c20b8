"""Transaction ports.

A TransactionManager hands out UnitOfWork scopes. Everything done through
one UnitOfWork either commits together or is rolled back together.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Awaitable, Callable, TypeVar

from fiqhqa.domain.user import UserRepository

T = TypeVar("T")


class UnitOfWork(ABC):
    """Handle bound to a single transaction scope."""

    users: UserRepository


class TransactionManager(ABC):
    """Port for scoped atomic execution units."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[UnitOfWork]:
        """Open a transaction scope.

        Commits when the block exits normally. Rolls back and re-raises on
        any exception, cancellation included. The underlying connection is
        always released.
        """

    async def run_in_transaction(
        self,
        fn: Callable[[UnitOfWork], Awaitable[T]],
    ) -> T:
        """Run ``fn`` with a unit of work and commit if it returns."""
        async with self.transaction() as uow:
            return await fn(uow)
