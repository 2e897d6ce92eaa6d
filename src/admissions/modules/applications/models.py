"""
Application Section Models

One table per application section. Each row is owned by exactly one user
(user_id is unique), so a user has at most one record per section. Sections
are independent: any subset may exist.

Photos and documents are tracked by name (and, for the photo, byte size)
only; the files themselves are stored elsewhere.
"""

import enum
import uuid
from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from admissions.modules.shared import BaseModel


class Language(str, enum.Enum):
    """Primary language."""

    ENGLISH = "en"
    URDU = "ur"


class Citizenship(str, enum.Enum):
    """Citizenship status."""

    PAKISTANI = "PK"
    NON_PAKISTANI = "Non-PK"


class Gender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"


class MaritalStatus(str, enum.Enum):
    MARRIED = "Married"
    UNMARRIED = "Unmarried"


class Occupation(str, enum.Enum):
    """Father's occupation sector."""

    GOVERNMENT = "govt"
    NON_GOVERNMENT = "non-govt"


def _owner_column() -> Mapped[uuid.UUID]:
    return mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )


class Profile(BaseModel):
    """Personal profile section."""

    __tablename__ = "profiles"

    user_id: Mapped[uuid.UUID] = _owner_column()

    # Name
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    address: Mapped[str] = mapped_column(String(500), nullable=False)
    primary_lang: Mapped[Language] = mapped_column(
        SAEnum(Language, name="language"), nullable=False, default=Language.ENGLISH
    )
    citizen: Mapped[Citizenship] = mapped_column(
        SAEnum(Citizenship, name="citizenship"), nullable=False
    )
    # National identity card number, XXXXX-XXXXXXX-X
    cnic: Mapped[str] = mapped_column(String(15), nullable=False)
    gender: Mapped[Gender] = mapped_column(SAEnum(Gender, name="gender"), nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
    marital_status: Mapped[MaritalStatus] = mapped_column(
        SAEnum(MaritalStatus, name="marital_status"), nullable=False
    )
    phone: Mapped[str] = mapped_column(String(20), nullable=False)

    # Photo metadata
    photo_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    photo_bytes: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        Index("ix_profiles_cnic", "cnic", unique=True),
        Index("ix_profiles_created_at", "created_at"),
    )


class Family(BaseModel):
    """Family information section."""

    __tablename__ = "families"

    user_id: Mapped[uuid.UUID] = _owner_column()

    father_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mother_name: Mapped[str] = mapped_column(String(100), nullable=False)
    father_occupation: Mapped[Occupation] = mapped_column(
        SAEnum(Occupation, name="occupation"), nullable=False
    )

    __table_args__ = (Index("ix_families_created_at", "created_at"),)


class Education(BaseModel):
    """Education history section."""

    __tablename__ = "educations"

    user_id: Mapped[uuid.UUID] = _owner_column()

    matric_grades: Mapped[str] = mapped_column(String(200), nullable=False)
    matric_pic_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    fsc_grades: Mapped[str] = mapped_column(String(200), nullable=False)
    fsc_pic_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    college_name: Mapped[str] = mapped_column(String(200), nullable=False)

    __table_args__ = (Index("ix_educations_created_at", "created_at"),)


class Extracurricular(BaseModel):
    """Extracurricular activities section."""

    __tablename__ = "extracurriculars"

    user_id: Mapped[uuid.UUID] = _owner_column()

    clubs: Mapped[str] = mapped_column(String(500), nullable=False)
    cert_doc_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (Index("ix_extracurriculars_created_at", "created_at"),)
