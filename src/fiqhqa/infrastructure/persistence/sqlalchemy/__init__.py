"""SQLAlchemy persistence adapters."""

from fiqhqa.infrastructure.persistence.sqlalchemy.database import Database
from fiqhqa.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from fiqhqa.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from fiqhqa.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyTransactionManager,
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "Base",
    "Database",
    "SQLAlchemyTransactionManager",
    "SQLAlchemyUnitOfWork",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
