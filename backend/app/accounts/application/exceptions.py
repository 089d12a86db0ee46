"""Application-layer exceptions for use case error handling.

These exceptions wrap domain validation failures with a stable error code
so that whichever layer first receives raw user input (a form handler, an
API endpoint) can map them to a response without knowing domain internals.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidEmailError(ApplicationError):
    """Raised when an email address fails validation."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"Invalid email address: {email}",
            code="INVALID_EMAIL"
        )
        self.email = email


class InvalidAddressError(ApplicationError):
    """Raised when a postal address fails validation.

    Attributes:
        field: The offending address field (e.g., "postal_code", "city").
        reason: The domain validation message.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid address ({field}): {reason}",
            code="INVALID_ADDRESS"
        )
        self.field = field
        self.reason = reason
