"""
Unit tests for the registration schema.
"""

import pytest

from admissions.core.exceptions import ValidationFailedError
from admissions.core.validation import validate_payload
from admissions.modules.users.models import UserRole
from admissions.modules.users.schemas import PASSWORD_STRENGTH_MESSAGE, RegisterRequest
from tests.helpers import make_register_payload


def _errors(payload: dict) -> list[str]:
    with pytest.raises(ValidationFailedError) as exc_info:
        validate_payload(RegisterRequest, payload)
    return exc_info.value.errors


class TestRegisterRequest:
    """Tests for RegisterRequest validation."""

    def test_valid_payload_is_normalized(self):
        payload = make_register_payload(email="Ayesha.Khan@Example.COM", role="graduate")

        data = validate_payload(RegisterRequest, payload)

        assert data.email == "ayesha.khan@example.com"
        assert data.role == UserRole.GRADUATE
        assert data.full_name == "Ayesha Khan"

    def test_invalid_email(self):
        assert _errors(make_register_payload(email="not-an-email")) == [
            "Please provide a valid email address"
        ]

    def test_short_password(self):
        assert _errors(make_register_payload(password="Ab1!")) == [
            "Password must be at least 10 characters long"
        ]

    def test_long_password(self):
        assert _errors(make_register_payload(password="Ab1!" * 9)) == [
            "Password cannot exceed 32 characters"
        ]

    @pytest.mark.parametrize(
        "password",
        [
            "alllowercase1!",  # no uppercase
            "ALLUPPERCASE1!",  # no lowercase
            "NoDigitsHere!",  # no digit
            "NoSpecial1234",  # no special character
        ],
    )
    def test_weak_password(self, password):
        assert _errors(make_register_payload(password=password)) == [PASSWORD_STRENGTH_MESSAGE]

    def test_password_over_bcrypt_byte_limit(self):
        # 32 characters, 88 UTF-8 bytes
        password = "Aa1!" + "€" * 28

        assert _errors(make_register_payload(password=password)) == [
            "Password cannot exceed 72 bytes"
        ]

    def test_full_name_pattern(self):
        assert _errors(make_register_payload(fullName="Ayesha Kh4n")) == [
            "Full name can only contain letters and spaces"
        ]

    def test_phone_pattern(self):
        assert _errors(make_register_payload(phone="0300-1234567")) == [
            "Please provide a valid phone number"
        ]

    def test_short_address(self):
        assert _errors(make_register_payload(address="Lahore")) == [
            "Address must be at least 10 characters long"
        ]

    def test_unknown_role(self):
        assert _errors(make_register_payload(role="phd")) == [
            "Role must be either undergraduate or graduate"
        ]

    def test_multiple_errors_are_all_reported(self):
        errors = _errors(make_register_payload(email="bad", fullName="A", role="phd"))

        assert errors == [
            "Please provide a valid email address",
            "Full name must be at least 2 characters long",
            "Role must be either undergraduate or graduate",
        ]
