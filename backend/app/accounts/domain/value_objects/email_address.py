"""EmailAddress value object for validated email storage."""

import re
from dataclasses import dataclass
from typing import Self

from app.accounts.domain.exceptions import InvalidEmailAddress

# Local part of word characters, "+", "-" and "."; dot-separated domain
# labels ending in a letters-only top-level label
_EMAIL_PATTERN = re.compile(
    r"[\w+\-.]+@[a-z\d\-]+(?:\.[a-z\d\-]+)*\.[a-z]+",
    re.ASCII | re.IGNORECASE,
)


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a validated email address.

    Attributes:
        address: The validated email address, lower-cased.
    """

    address: str

    def __post_init__(self) -> None:
        """Lower-case the address, then validate its format."""
        if not isinstance(self.address, str):
            raise TypeError(f"address must be a str, got {type(self.address).__name__}")
        normalized = self.address.lower()
        if not _EMAIL_PATTERN.fullmatch(normalized):
            raise InvalidEmailAddress(self.address)
        object.__setattr__(self, "address", normalized)

    @classmethod
    def create(cls, address: str) -> Self:
        """Create a validated EmailAddress.

        Raises:
            InvalidEmailAddress: If the address does not look like an email.
        """
        return cls(address)

    @property
    def domain(self) -> str:
        """The part of the address after the last "@"."""
        return self.address.rsplit("@", 1)[-1]

    def __str__(self) -> str:
        return self.address
