"""Domain entities for user accounts."""

from app.accounts.domain.entities.user import User

__all__ = ["User"]
