"""Domain validation errors raised while constructing value objects.

Every error is raised synchronously from a constructor: an object either
comes into existence fully valid or not at all. They subclass ValueError so
callers catching ValueError keep working.
"""


class ValidationError(ValueError):
    """Base class for all value object validation failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPostalCode(ValidationError):
    """Raised when a postal code does not normalize to exactly 7 digits."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid postal code: {value!r}")
        self.value = value


class MissingField(ValidationError):
    """Raised when a required address field is empty or whitespace-only."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name.capitalize()} cannot be empty")
        self.field_name = field_name


class InvalidEmailAddress(ValidationError):
    """Raised when an email address does not have an accepted shape."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid email address: {value!r}")
        self.value = value
