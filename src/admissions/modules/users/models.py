"""
User Models

Database model for applicant accounts and authentication.
"""

from datetime import date
from enum import Enum

from sqlalchemy import Boolean, Date, Index, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from admissions.modules.shared import BaseModel


class UserRole(str, Enum):
    """Applicant roles."""

    UNDERGRADUATE = "undergraduate"
    GRADUATE = "graduate"


class User(BaseModel):
    """
    User model for authentication and authorization.

    This is the identity root. Application sections (profile, family,
    education, extracurricular) reference it by user_id.

    The email is stored lower-cased so lookups are case-insensitive.
    """

    __tablename__ = "users"

    # Authentication fields
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Profile fields
    full_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    dob: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )
    phone: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
    address: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role"),
        nullable=False,
        default=UserRole.UNDERGRADUATE,
    )

    # Not wired to any verification flow yet
    is_email_verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    is_phone_verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    __table_args__ = (
        Index("ix_users_role", "role"),
        Index("ix_users_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role.value})>"
