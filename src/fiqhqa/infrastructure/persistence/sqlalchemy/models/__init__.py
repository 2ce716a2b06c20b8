"""SQLAlchemy models.

Importing this package registers every table on ``Base.metadata``.
"""

from fiqhqa.infrastructure.persistence.sqlalchemy.models.base import Base
from fiqhqa.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "UserModel",
]
