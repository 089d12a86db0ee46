"""Use case for turning raw user input into a validated User entity.

Implements user construction by orchestrating:
- Email validation via EmailAddress value object
- Address normalization and validation via Address value object
- User entity creation (unsaved; storing it is the caller's concern)
"""

from app.accounts.application.dto.user_dto import UserInput
from app.accounts.application.exceptions import InvalidAddressError, InvalidEmailError
from app.accounts.domain.entities.user import User
from app.accounts.domain.exceptions import InvalidEmailAddress, InvalidPostalCode, MissingField
from app.accounts.domain.value_objects.address import Address
from app.accounts.domain.value_objects.email_address import EmailAddress
from app.core.logging import get_logger

logger = get_logger(__name__)


class BuildUserUseCase:
    """Application service for building a User from submitted details.

    Validation failures raised by the value objects are translated into
    application errors carrying a stable code and the offending field.
    """

    def execute(self, request: UserInput) -> User:
        """Execute the user construction.

        Args:
            request: UserInput with the raw user details.

        Returns:
            A new, unsaved User entity (id is None).

        Raises:
            InvalidEmailError: If the email address is invalid.
            InvalidAddressError: If the postal code is invalid or a required
                address field is blank.
        """
        # 1. Validate email using domain value object
        try:
            email_address = EmailAddress.create(request.email_address)
        except InvalidEmailAddress as e:
            logger.warning(f"Rejected email address: {e.message}")
            raise InvalidEmailError(request.email_address) from e

        # 2. Normalize and validate the postal address
        try:
            address = Address.create(
                prefecture=request.prefecture,
                city=request.city,
                street=request.street,
                postal_code=request.postal_code,
            )
        except InvalidPostalCode as e:
            logger.warning(f"Rejected address: {e.message}")
            raise InvalidAddressError("postal_code", e.message) from e
        except MissingField as e:
            logger.warning(f"Rejected address: {e.message}")
            raise InvalidAddressError(e.field_name, e.message) from e

        # 3. Create the User domain entity
        user = User(
            id=None,  # Will be assigned by the database
            name=request.name,
            email_address=email_address,
            address=address,
        )
        logger.debug(f"Built user {user.name!r} <{user.email_address}> at {user.address}")
        return user
