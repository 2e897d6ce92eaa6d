"""
Application Sections

The four sections share one shape: a record owned by a single user, written
by upsert and read by owner. A SectionDefinition binds a section name to its
table, its request/response schemas and its user-facing messages; the
repository, service and router work from these definitions instead of
per-section code.
"""

from dataclasses import dataclass, field

from admissions.core.exceptions import DuplicateNationalIdError, ServiceError
from admissions.core.validation import RequestSchema
from admissions.modules.applications.models import Education, Extracurricular, Family, Profile
from admissions.modules.applications.schemas import (
    EducationRequest,
    EducationResponse,
    ExtracurricularRequest,
    ExtracurricularResponse,
    FamilyRequest,
    FamilyResponse,
    ProfileRequest,
    ProfileResponse,
)
from admissions.modules.shared import BaseModel
from admissions.modules.shared.schemas import ResponseSchema


@dataclass(frozen=True)
class SectionDefinition:
    """
    Describes one application section.

    Attributes:
        name: Section key used in routes and the aggregate response
        model: ORM model (must have a unique user_id column)
        request_schema: Validated input
        response_schema: Persisted view
        saved_message: Message returned after a successful upsert
        not_found_message: Message returned when the user has no record yet
        unique_fields: Columns that must not repeat across users, each with
            the error raised when another user already holds the value
    """

    name: str
    model: type[BaseModel]
    request_schema: type[RequestSchema]
    response_schema: type[ResponseSchema]
    saved_message: str
    not_found_message: str
    unique_fields: dict[str, type[ServiceError]] = field(default_factory=dict)


PROFILE = SectionDefinition(
    name="profile",
    model=Profile,
    request_schema=ProfileRequest,
    response_schema=ProfileResponse,
    saved_message="Profile saved successfully",
    not_found_message="Profile not found",
    unique_fields={"cnic": DuplicateNationalIdError},
)

FAMILY = SectionDefinition(
    name="family",
    model=Family,
    request_schema=FamilyRequest,
    response_schema=FamilyResponse,
    saved_message="Family information saved successfully",
    not_found_message="Family information not found",
)

EDUCATION = SectionDefinition(
    name="education",
    model=Education,
    request_schema=EducationRequest,
    response_schema=EducationResponse,
    saved_message="Education information saved successfully",
    not_found_message="Education information not found",
)

EXTRACURRICULAR = SectionDefinition(
    name="extracurricular",
    model=Extracurricular,
    request_schema=ExtracurricularRequest,
    response_schema=ExtracurricularResponse,
    saved_message="Extracurricular information saved successfully",
    not_found_message="Extracurricular information not found",
)

SECTIONS: tuple[SectionDefinition, ...] = (PROFILE, FAMILY, EDUCATION, EXTRACURRICULAR)
