"""Database infrastructure components.

This module exports the SQLAlchemy models and the Base class whose
metadata the Alembic migration environment compares against.
"""

from app.accounts.infrastructure.db.models import Base, UserModel

__all__ = [
    # Base class
    "Base",
    # Models
    "UserModel",
]
