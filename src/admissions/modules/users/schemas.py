"""
User Schemas

Registration input and the sanitized user view (never includes the hash).
"""

import re
from datetime import date, datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from admissions.core.security import BCRYPT_MAX_BYTES
from admissions.core.validation import RequestSchema, check_date_of_birth
from admissions.modules.shared.schemas import ResponseSchema
from admissions.modules.users.models import UserRole

PHONE_PATTERN = r"^[\+]?[1-9][\d]{0,15}$"
FULL_NAME_PATTERN = r"^[a-zA-Z\s]+$"
# Lowercase, uppercase, digit and one of @$!%*?&, starting with an allowed character
PASSWORD_STRENGTH_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]"
)

PASSWORD_STRENGTH_MESSAGE = (
    "Password must contain at least one uppercase letter, one lowercase letter, "
    "one number, and one special character"
)

EMAIL_MESSAGES = {
    "required": "Email is required",
    "invalid": "Please provide a valid email address",
    "type": "Please provide a valid email address",
}

DOB_MESSAGES = {
    "required": "Date of birth is required",
    "type": "Date of birth must be a valid date",
}

PHONE_MESSAGES = {
    "required": "Phone number is required",
    "min": "Phone number is required",
    "pattern": "Please provide a valid phone number",
    "type": "Please provide a valid phone number",
}

ADDRESS_MESSAGES = {
    "required": "Address is required",
    "min": "Address must be at least 10 characters long",
    "max": "Address cannot exceed 500 characters",
    "type": "Address must be a string",
}


class RegisterRequest(RequestSchema):
    """Request body for POST /auth/register."""

    email: EmailStr
    password: str = Field(..., min_length=10, max_length=32)
    full_name: str = Field(..., min_length=2, max_length=100, pattern=FULL_NAME_PATTERN)
    dob: date
    phone: str = Field(..., min_length=1, pattern=PHONE_PATTERN)
    address: str = Field(..., min_length=10, max_length=500)
    role: UserRole

    error_messages = {
        "email": EMAIL_MESSAGES,
        "password": {
            "required": "Password is required",
            "min": "Password must be at least 10 characters long",
            "max": "Password cannot exceed 32 characters",
            "type": "Password must be a string",
        },
        "full_name": {
            "required": "Full name is required",
            "min": "Full name must be at least 2 characters long",
            "max": "Full name cannot exceed 100 characters",
            "pattern": "Full name can only contain letters and spaces",
            "type": "Full name must be a string",
        },
        "dob": DOB_MESSAGES,
        "phone": PHONE_MESSAGES,
        "address": ADDRESS_MESSAGES,
        "role": {
            "required": "Role is required",
            "only": "Role must be either undergraduate or graduate",
        },
    }

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, v: str) -> str:
        if not PASSWORD_STRENGTH_RE.match(v):
            raise PydanticCustomError("password_strength", PASSWORD_STRENGTH_MESSAGE)
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password cannot exceed {max_bytes} bytes",
                {"max_bytes": BCRYPT_MAX_BYTES},
            )
        return v

    @field_validator("dob")
    @classmethod
    def check_dob(cls, v: date) -> date:
        return check_date_of_birth(v)


class UserResponse(ResponseSchema):
    """Sanitized user view."""

    id: UUID
    email: str
    full_name: str
    dob: date
    phone: str
    address: str
    role: UserRole
    is_email_verified: bool
    is_phone_verified: bool
    created_at: datetime
    updated_at: datetime
