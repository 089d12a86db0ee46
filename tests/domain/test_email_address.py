"""Unit tests for the EmailAddress value object."""

import dataclasses

import pytest

from app.accounts.domain.exceptions import InvalidEmailAddress
from app.accounts.domain.value_objects.email_address import EmailAddress


class TestEmailAddressCreation:
    """Tests for EmailAddress construction and validation."""

    def test_lower_cases_address(self) -> None:
        """Test that the stored address is lower-cased."""
        email = EmailAddress.create("User@Example.COM")

        assert email.address == "user@example.com"
        assert email.domain == "example.com"

    def test_accepts_plus_dot_and_multi_label_domain(self) -> None:
        """Test plus sign, dotted local part and sub-domains."""
        email = EmailAddress.create("a.b+c@sub.domain.co")

        assert email.address == "a.b+c@sub.domain.co"
        assert email.domain == "sub.domain.co"

    @pytest.mark.parametrize(
        "valid",
        [
            "first_last@example.com",
            "x-y@my-host.example.org",
            "123@456.jp",
        ],
    )
    def test_accepts_valid_shapes(self, valid: str) -> None:
        """Test a few more accepted address shapes."""
        assert EmailAddress.create(valid).address == valid

    @pytest.mark.parametrize(
        "invalid",
        [
            "not-an-email",
            "",
            "user@",
            "@example.com",
            "user@example",
            "user@example.c0m",
            "user@@example.com",
            "user name@example.com",
            "user@exa_mple.com",
            "user@example.com.",
            "üser@example.com",
            "user@example.com\n",
        ],
    )
    def test_rejects_invalid_shapes(self, invalid: str) -> None:
        """Test InvalidEmailAddress for malformed addresses."""
        with pytest.raises(InvalidEmailAddress) as exc_info:
            EmailAddress.create(invalid)

        assert exc_info.value.value == invalid

    def test_error_message_quotes_rejected_value(self) -> None:
        """Test that the rejected value is shown quoted, like postal codes."""
        with pytest.raises(InvalidEmailAddress) as exc_info:
            EmailAddress.create("not an email")

        assert str(exc_info.value) == "Invalid email address: 'not an email'"

    def test_rejects_non_string(self) -> None:
        """Test that non-string input is a type error."""
        with pytest.raises(TypeError):
            EmailAddress(None)  # type: ignore[arg-type]


class TestEmailAddressValueSemantics:
    """Tests for equality, hashing, immutability and rendering."""

    def test_equality_ignores_input_case(self) -> None:
        """Test that differently-cased inputs produce equal values."""
        first = EmailAddress.create("USER@example.com")
        second = EmailAddress.create("user@EXAMPLE.com")

        assert first == second
        assert hash(first) == hash(second)

    def test_different_addresses_are_not_equal(self) -> None:
        """Test that different addresses are different values."""
        assert EmailAddress("a@example.com") != EmailAddress("b@example.com")

    def test_not_equal_to_plain_string(self) -> None:
        """Test that an EmailAddress never equals its string form."""
        email = EmailAddress("user@example.com")

        assert email != "user@example.com"

    def test_is_immutable(self) -> None:
        """Test that attribute assignment is rejected."""
        email = EmailAddress("user@example.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            email.address = "other@example.com"  # type: ignore[misc]

    def test_str_round_trips(self) -> None:
        """Test that re-parsing the string form gives an equal value."""
        email = EmailAddress.create("User@Example.COM")

        assert str(email) == "user@example.com"
        assert EmailAddress.create(str(email)) == email
