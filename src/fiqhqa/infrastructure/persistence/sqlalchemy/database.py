"""Engine and session factory for one database URL."""

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fiqhqa.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


def _is_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite"


def _sqlite_file(url: URL) -> Path | None:
    if not _is_sqlite(url) or not url.database or url.database == ":memory:":
        return None
    return Path(url.database)


def _begin_immediate(engine: AsyncEngine) -> None:
    """Take SQLite's write lock when a transaction begins.

    SQLite ignores ``SELECT ... FOR UPDATE`` and the driver defers BEGIN
    until the first write, so two transactions could both read a row and
    then both overwrite it. With BEGIN IMMEDIATE the second transaction
    waits until the first has committed and then reads the new state.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _driver_autocommit(dbapi_connection, connection_record):
        # Hand BEGIN/COMMIT over to SQLAlchemy
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """Owns the connection pool for one URL.

    Nothing touches the database or the filesystem until the first
    session is used or ``create_schema`` runs.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = make_url(url)
        self.engine = create_async_engine(self.url, echo=echo, pool_pre_ping=True)
        if _is_sqlite(self.url):
            _begin_immediate(self.engine)

        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched.

        For a SQLite file the parent directory is created first.
        """
        db_file = _sqlite_file(self.url)
        if db_file is not None:
            db_file.parent.mkdir(parents=True, exist_ok=True)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%s)", self.url.render_as_string())

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")
