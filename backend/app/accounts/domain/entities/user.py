"""User entity representing a registered account holder."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from app.accounts.domain.value_objects.address import Address
from app.accounts.domain.value_objects.email_address import EmailAddress


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """Domain entity representing a user and their contact details.

    Attributes:
        id: Database identifier (None for unsaved entities).
        name: Display name as entered by the user.
        email_address: Validated email address.
        address: Validated postal address.
        created_at: Timestamp when the user was created.
        updated_at: Timestamp of the last change to the user.
    """

    id: Optional[int]
    name: str
    email_address: EmailAddress
    address: Address
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def change_email_address(self, email_address: EmailAddress) -> None:
        """Replace the email address and bump updated_at."""
        self.email_address = email_address
        self.touch()

    def move_to(self, address: Address) -> None:
        """Replace the postal address and bump updated_at."""
        self.address = address
        self.touch()

    def touch(self) -> None:
        """Mark the user as changed now."""
        self.updated_at = _utcnow()

    def to_record(self) -> dict[str, Any]:
        """Flatten the user into the string columns of the users table.

        Returns:
            Mapping of column name to value, without the id.
        """
        return {
            "name": self.name,
            "email_address": str(self.email_address),
            "address": str(self.address),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
