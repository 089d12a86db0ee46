"""Data Transfer Objects for user input and output.

UserInput is the boundary where raw form or JSON values are turned into
strings before they reach the domain value objects. UserDTO is the flat,
serializable view of a User entity.
"""

from datetime import datetime
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.accounts.domain.entities.user import User


class UserInput(BaseModel):
    """Raw user details as submitted by a form or API client.

    Only type coercion happens here; format validation is left to the
    Address and EmailAddress value objects.
    """

    name: str = Field(description="Display name")
    email_address: str = Field(description="Email address, any case")
    prefecture: str = Field(description="Prefecture name (e.g., '東京都')")
    city: str = Field(description="City or ward name (e.g., '千代田区')")
    street: str = Field(description="Street address (e.g., '千代田1-1')")
    postal_code: str = Field(
        description="Postal code in any notation (e.g., '100-0001', '〒1000001', 1000001)"
    )

    @field_validator("postal_code", mode="before")
    @classmethod
    def _stringify_postal_code(cls, value: Any) -> Any:
        # JSON clients often send the code as a number; leading zeros are lost
        # for such input and the value object will reject it as too short
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class UserDTO(BaseModel):
    """User data for responses and display."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, description="Database identifier, if stored")
    name: str = Field(description="Display name")
    email_address: str = Field(description="Normalized (lower-cased) email address")
    email_domain: str = Field(description="Domain part of the email address")
    prefecture: str = Field(description="Prefecture name")
    city: str = Field(description="City or ward name")
    street: str = Field(description="Street address")
    postal_code: str = Field(description="Seven-digit postal code")
    formatted_address: str = Field(description="Address rendered for display")
    created_at: datetime = Field(description="When the user was created (UTC)")
    updated_at: datetime = Field(description="When the user was last changed (UTC)")

    @classmethod
    def from_entity(cls, user: User) -> Self:
        """Build a UserDTO from a User entity.

        Args:
            user: The User entity.

        Returns:
            UserDTO with all fields flattened to strings.
        """
        return cls(
            id=user.id,
            name=user.name,
            email_address=user.email_address.address,
            email_domain=user.email_address.domain,
            prefecture=user.address.prefecture,
            city=user.address.city,
            street=user.address.street,
            postal_code=user.address.postal_code,
            formatted_address=str(user.address),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
