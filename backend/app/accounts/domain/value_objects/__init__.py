"""Domain value objects for user accounts.

This module exports immutable value objects used throughout the domain layer:
- Address: Postal addresses with normalized postal codes
- EmailAddress: Validated, lower-cased email addresses
"""

from app.accounts.domain.value_objects.address import Address
from app.accounts.domain.value_objects.email_address import EmailAddress

__all__ = ["Address", "EmailAddress"]
