# Domain layer - pure business rules, no framework dependencies

from app.accounts.domain.entities.user import User
from app.accounts.domain.exceptions import (
    InvalidEmailAddress,
    InvalidPostalCode,
    MissingField,
    ValidationError,
)
from app.accounts.domain.value_objects.address import Address
from app.accounts.domain.value_objects.email_address import EmailAddress

__all__ = [
    # Value objects
    "Address",
    "EmailAddress",
    # Entities
    "User",
    # Validation errors
    "ValidationError",
    "InvalidPostalCode",
    "MissingField",
    "InvalidEmailAddress",
]
