"""
Unit tests for request validation helpers.

These tests cover:
- Calendar-aware age calculation
- Date of birth bounds
- Error collection: order, field messages, unknown keys
- Non-object bodies
"""

from datetime import date, timedelta

import pytest

from admissions.core.exceptions import ValidationFailedError
from admissions.core.validation import (
    BODY_NOT_OBJECT_MESSAGE,
    calculate_age,
    validate_payload,
)
from admissions.modules.applications.schemas import FamilyRequest, ProfileRequest
from tests.helpers import make_profile_payload, years_ago


class TestCalculateAge:
    """Tests for calculate_age."""

    def test_birthday_already_passed_this_year(self):
        assert calculate_age(date(2000, 1, 15), today=date(2026, 6, 1)) == 26

    def test_birthday_later_this_year(self):
        assert calculate_age(date(2000, 12, 15), today=date(2026, 6, 1)) == 25

    def test_birthday_today(self):
        assert calculate_age(date(2010, 6, 1), today=date(2026, 6, 1)) == 16

    def test_day_before_birthday(self):
        """Same month, one day short: the year does not count yet."""
        assert calculate_age(date(2010, 6, 2), today=date(2026, 6, 1)) == 15


class TestDateOfBirth:
    """DOB rules applied through a section schema."""

    def test_exactly_sixteen_today_is_accepted(self):
        payload = make_profile_payload(dob=years_ago(16).isoformat())

        profile = validate_payload(ProfileRequest, payload)

        assert profile.dob == years_ago(16)

    def test_one_day_short_of_sixteen_is_rejected(self):
        dob = years_ago(16) + timedelta(days=1)
        payload = make_profile_payload(dob=dob.isoformat())

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(ProfileRequest, payload)

        assert exc_info.value.errors == ["User must be at least 16 years old"]

    def test_future_date_is_rejected(self):
        dob = date.today() + timedelta(days=1)
        payload = make_profile_payload(dob=dob.isoformat())

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(ProfileRequest, payload)

        assert exc_info.value.errors == ["Date of birth cannot be in the future"]

    def test_unparseable_date_is_rejected(self):
        payload = make_profile_payload(dob="not-a-date")

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(ProfileRequest, payload)

        assert exc_info.value.errors == ["Date of birth must be a valid date"]


class TestCollectErrors:
    """Tests for how validation failures are reported."""

    def test_every_missing_field_reported_in_declaration_order(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(ProfileRequest, {})

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Validation error"
        assert exc_info.value.errors == [
            "First name is required",
            "Last name is required",
            "Address is required",
            "Primary language is required",
            "Citizen status is required",
            "CNIC is required",
            "Gender is required",
            "Date of birth is required",
            "Marital status is required",
            "Phone number is required",
        ]

    def test_whitespace_only_string_counts_as_empty(self):
        payload = {"fatherName": "   ", "motherName": "Fatima", "fatherOccupation": "govt"}

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(FamilyRequest, payload)

        assert exc_info.value.errors == ["Father's name must be at least 2 characters long"]

    def test_strings_are_trimmed(self):
        payload = {"fatherName": "  Imran  ", "motherName": "Fatima", "fatherOccupation": "govt"}

        family = validate_payload(FamilyRequest, payload)

        assert family.father_name == "Imran"

    def test_enum_message(self):
        payload = {"fatherName": "Imran", "motherName": "Fatima", "fatherOccupation": "army"}

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(FamilyRequest, payload)

        assert exc_info.value.errors == ["Father's occupation must be either govt or non-govt"]

    def test_unknown_key_is_rejected(self):
        payload = make_profile_payload(favouriteColour="blue")

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(ProfileRequest, payload)

        assert exc_info.value.errors == ['"favouriteColour" is not allowed']

    def test_snake_case_keys_are_accepted(self):
        payload = {"father_name": "Imran", "mother_name": "Fatima", "father_occupation": "govt"}

        family = validate_payload(FamilyRequest, payload)

        assert family.mother_name == "Fatima"

    @pytest.mark.parametrize("raw", [[], "text", 42, None])
    def test_non_object_body_is_rejected(self, raw):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_payload(FamilyRequest, raw)

        assert exc_info.value.errors == [BODY_NOT_OBJECT_MESSAGE]
