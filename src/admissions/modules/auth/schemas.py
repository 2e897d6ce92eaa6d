"""Authentication schemas."""

from pydantic import EmailStr, Field, field_validator

from admissions.core.validation import RequestSchema
from admissions.modules.shared.schemas import ResponseSchema
from admissions.modules.users.schemas import EMAIL_MESSAGES, UserResponse


class LoginRequest(RequestSchema):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    error_messages = {
        "email": EMAIL_MESSAGES,
        "password": {
            "required": "Password is required",
            "min": "Password is required",
            "type": "Password must be a string",
        },
    }

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class LoginResponse(ResponseSchema):
    """Login response data: the sanitized user and a bearer token."""

    user: UserResponse
    token: str
    token_type: str = "bearer"
