"""Address value object for Japanese postal addresses."""

import re
from dataclasses import dataclass
from typing import Self

from app.accounts.domain.exceptions import InvalidPostalCode, MissingField

POSTAL_CODE_MARK = "〒"

# Only ASCII digits survive normalization; full-width digits are noise
_NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
_POSTAL_CODE_PATTERN = re.compile(r"[0-9]{7}")

# ASCII whitespace and NUL; an ideographic space (U+3000) counts as content
_BLANK_CHARACTERS = " \t\n\v\f\r\0"


@dataclass(frozen=True)
class Address:
    """Immutable value object representing a postal address.

    The postal code is normalized by stripping every non-digit character,
    so "100-0001" and "〒100 0001" are both stored as "1000001".

    Attributes:
        prefecture: Prefecture name (e.g., 東京都).
        city: City or ward name (e.g., 千代田区).
        street: Street address including block and building numbers.
        postal_code: Seven-digit postal code, digits only.
    """

    prefecture: str
    city: str
    street: str
    postal_code: str

    def __post_init__(self) -> None:
        """Normalize the postal code and validate all fields."""
        if not isinstance(self.postal_code, str):
            raise TypeError(
                f"postal_code must be a str, got {type(self.postal_code).__name__}"
            )
        normalized = _NON_DIGIT_PATTERN.sub("", self.postal_code)
        if not _POSTAL_CODE_PATTERN.fullmatch(normalized):
            raise InvalidPostalCode(self.postal_code)
        object.__setattr__(self, "postal_code", normalized)

        for field_name in ("prefecture", "city", "street"):
            value = getattr(self, field_name)
            if value is None:
                raise MissingField(field_name)
            if not isinstance(value, str):
                raise TypeError(
                    f"{field_name} must be a str, got {type(value).__name__}"
                )
            if not value.strip(_BLANK_CHARACTERS):
                raise MissingField(field_name)

    @classmethod
    def create(cls, prefecture: str, city: str, street: str, postal_code: str) -> Self:
        """Create a validated Address.

        Args:
            prefecture: Prefecture name.
            city: City or ward name.
            street: Street address.
            postal_code: Postal code in any common notation.

        Returns:
            A new Address instance with a normalized postal code.

        Raises:
            InvalidPostalCode: If the code does not normalize to 7 digits.
            MissingField: If prefecture, city or street is blank.
            TypeError: If any argument is not a string.
        """
        return cls(
            prefecture=prefecture,
            city=city,
            street=street,
            postal_code=postal_code,
        )

    def __str__(self) -> str:
        return f"{POSTAL_CODE_MARK}{self.postal_code} {self.prefecture}{self.city}{self.street}"
