"""
Application Section Schemas

Request bodies for the four sections and their persisted views.
Strings are trimmed; every field error is reported with its own message.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field, field_validator

from admissions.core.validation import RequestSchema, check_date_of_birth
from admissions.modules.applications.models import (
    Citizenship,
    Gender,
    Language,
    MaritalStatus,
    Occupation,
)
from admissions.modules.shared.schemas import ResponseSchema
from admissions.modules.users.schemas import (
    ADDRESS_MESSAGES,
    DOB_MESSAGES,
    PHONE_MESSAGES,
    PHONE_PATTERN,
)

CNIC_PATTERN = r"^\d{5}-\d{7}-\d{1}$"
MAX_PHOTO_BYTES = 5 * 1024 * 1024


# ============================================
# Profile
# ============================================


class ProfileRequest(RequestSchema):
    """Request body for POST /application/create-or-update-profile."""

    first_name: str = Field(..., min_length=1, max_length=50)
    middle_name: str | None = Field(None, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=10, max_length=500)
    primary_lang: Language
    citizen: Citizenship
    cnic: str = Field(..., pattern=CNIC_PATTERN)
    gender: Gender
    dob: date
    marital_status: MaritalStatus
    phone: str = Field(..., min_length=1, pattern=PHONE_PATTERN)
    photo_name: str | None = None
    # Strict: JSON booleans and fractional numbers are not byte counts
    photo_bytes: int | None = Field(None, ge=0, le=MAX_PHOTO_BYTES, strict=True)

    error_messages = {
        "first_name": {
            "required": "First name is required",
            "min": "First name must be at least 1 character long",
            "max": "First name cannot exceed 50 characters",
            "type": "First name must be a string",
        },
        "middle_name": {
            "max": "Middle name cannot exceed 50 characters",
            "type": "Middle name must be a string",
        },
        "last_name": {
            "required": "Last name is required",
            "min": "Last name must be at least 1 character long",
            "max": "Last name cannot exceed 50 characters",
            "type": "Last name must be a string",
        },
        "address": ADDRESS_MESSAGES,
        "primary_lang": {
            "required": "Primary language is required",
            "only": "Primary language must be either English or Urdu",
        },
        "citizen": {
            "required": "Citizen status is required",
            "only": "Citizen status must be either PK or Non-PK",
        },
        "cnic": {
            "required": "CNIC is required",
            "pattern": "Please enter a valid CNIC format (XXXXX-XXXXXXX-X)",
            "type": "Please enter a valid CNIC format (XXXXX-XXXXXXX-X)",
        },
        "gender": {
            "required": "Gender is required",
            "only": "Gender must be either Male or Female",
        },
        "dob": DOB_MESSAGES,
        "marital_status": {
            "required": "Marital status is required",
            "only": "Marital status must be either Married or Unmarried",
        },
        "phone": PHONE_MESSAGES,
        "photo_name": {"type": "Photo name must be a string"},
        "photo_bytes": {
            "min": "Photo size cannot be negative",
            "max": "Photo size cannot exceed 5MB",
            "type": "Photo size must be a whole number of bytes",
        },
    }

    @field_validator("dob")
    @classmethod
    def check_dob(cls, v: date) -> date:
        return check_date_of_birth(v)


class ProfileResponse(ResponseSchema):
    id: UUID
    user_id: UUID
    first_name: str
    middle_name: str | None = None
    last_name: str
    address: str
    primary_lang: Language
    citizen: Citizenship
    cnic: str
    gender: Gender
    dob: date
    marital_status: MaritalStatus
    phone: str
    photo_name: str | None = None
    photo_bytes: int | None = None
    created_at: datetime
    updated_at: datetime


# ============================================
# Family
# ============================================


class FamilyRequest(RequestSchema):
    """Request body for POST /application/create-or-update-family."""

    father_name: str = Field(..., min_length=2, max_length=100)
    mother_name: str = Field(..., min_length=2, max_length=100)
    father_occupation: Occupation

    error_messages = {
        "father_name": {
            "required": "Father's name is required",
            "min": "Father's name must be at least 2 characters long",
            "max": "Father's name cannot exceed 100 characters",
            "type": "Father's name must be a string",
        },
        "mother_name": {
            "required": "Mother's name is required",
            "min": "Mother's name must be at least 2 characters long",
            "max": "Mother's name cannot exceed 100 characters",
            "type": "Mother's name must be a string",
        },
        "father_occupation": {
            "required": "Father's occupation is required",
            "only": "Father's occupation must be either govt or non-govt",
        },
    }


class FamilyResponse(ResponseSchema):
    id: UUID
    user_id: UUID
    father_name: str
    mother_name: str
    father_occupation: Occupation
    created_at: datetime
    updated_at: datetime


# ============================================
# Education
# ============================================


class EducationRequest(RequestSchema):
    """Request body for POST /application/create-or-update-education."""

    matric_grades: str = Field(..., min_length=1, max_length=200)
    matric_pic_name: str | None = None
    fsc_grades: str = Field(..., min_length=1, max_length=200)
    fsc_pic_name: str | None = None
    college_name: str = Field(..., min_length=2, max_length=200)

    error_messages = {
        "matric_grades": {
            "required": "Matric grades are required",
            "min": "Matric grades must be provided",
            "max": "Matric grades cannot exceed 200 characters",
            "type": "Matric grades must be a string",
        },
        "matric_pic_name": {"type": "Matric picture name must be a string"},
        "fsc_grades": {
            "required": "FSC grades are required",
            "min": "FSC grades must be provided",
            "max": "FSC grades cannot exceed 200 characters",
            "type": "FSC grades must be a string",
        },
        "fsc_pic_name": {"type": "FSC picture name must be a string"},
        "college_name": {
            "required": "College name is required",
            "min": "College name must be at least 2 characters long",
            "max": "College name cannot exceed 200 characters",
            "type": "College name must be a string",
        },
    }


class EducationResponse(ResponseSchema):
    id: UUID
    user_id: UUID
    matric_grades: str
    matric_pic_name: str | None = None
    fsc_grades: str
    fsc_pic_name: str | None = None
    college_name: str
    created_at: datetime
    updated_at: datetime


# ============================================
# Extracurricular
# ============================================


class ExtracurricularRequest(RequestSchema):
    """Request body for POST /application/create-or-update-extracurricular."""

    clubs: str = Field(..., min_length=1, max_length=500)
    cert_doc_name: str | None = None

    error_messages = {
        "clubs": {
            "required": "Clubs information is required",
            "min": "Clubs information must be provided",
            "max": "Clubs information cannot exceed 500 characters",
            "type": "Clubs information must be a string",
        },
        "cert_doc_name": {"type": "Certificate document name must be a string"},
    }


class ExtracurricularResponse(ResponseSchema):
    id: UUID
    user_id: UUID
    clubs: str
    cert_doc_name: str | None = None
    created_at: datetime
    updated_at: datetime


# ============================================
# Aggregate
# ============================================


class ApplicationOverview(ResponseSchema):
    """All four sections for one user; missing sections are null."""

    profile: ProfileResponse | None = None
    family: FamilyResponse | None = None
    education: EducationResponse | None = None
    extracurricular: ExtracurricularResponse | None = None
