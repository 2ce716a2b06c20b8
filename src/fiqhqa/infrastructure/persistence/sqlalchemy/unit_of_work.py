"""SQLAlchemy unit of work and transaction manager."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fiqhqa.application.ports import TransactionManager, UnitOfWork
from fiqhqa.domain.shared.exceptions import StorageError
from fiqhqa.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy-backed unit of work.

    Opens one session on enter. On exit the session is committed if the
    block succeeded, rolled back otherwise, and closed in every case.
    Storage faults are re-raised as StorageError after the rollback.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            msg = "UnitOfWork session accessed before entering context"
            raise RuntimeError(msg)
        return self._session

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        if self._session is not None:
            msg = "UnitOfWork is already active"
            raise RuntimeError(msg)
        self._session = self._session_factory()
        self.users = UserRepositorySQLAlchemy(self._session)
        logger.debug("uow: session opened")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        session = self.session
        try:
            if exc is None:
                await session.commit()
                logger.debug("uow: committed")
            else:
                logger.debug("uow: rollback due to %s", exc_type.__name__)
                await session.rollback()
        except SQLAlchemyError as e:
            logger.exception("uow: storage failure while finalising")
            await session.rollback()
            raise StorageError from e
        finally:
            await session.close()
            self._session = None
            del self.users
            logger.debug("uow: session closed")

        if isinstance(exc, SQLAlchemyError):
            logger.error("uow: storage failure: %s", exc)
            raise StorageError from exc


class SQLAlchemyTransactionManager(TransactionManager):
    """Hands out a fresh SQLAlchemyUnitOfWork per transaction."""

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    def transaction(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self._session_factory)
