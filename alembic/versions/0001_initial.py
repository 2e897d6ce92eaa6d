"""initial schema: users and application section tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 12:00:00.000000

This migration creates:
1. The users table (unique email, role index, newest-first index)
2. One table per application section (profiles, families, educations,
   extracurriculars), each with a unique user_id so a user owns at most one
   record per section; the upsert conflicts on that constraint
3. A unique index on profiles.cnic
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _base_columns() -> list[sa.Column]:
    """Primary key and timestamps (from BaseModel)."""
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _owner_columns(table: str) -> list:
    """user_id column plus its FK and unique constraints."""
    return [
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=f"fk_{table}_user_id",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint("user_id", name=f"uq_{table}_user_id"),
    ]


def upgrade() -> None:
    """Create users and the four section tables."""
    op.create_table(
        "users",
        *_base_columns(),
        # Authentication fields
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        # Profile fields
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("dob", sa.Date(), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column(
            "role",
            sa.Enum("UNDERGRADUATE", "GRADUATE", name="user_role"),
            nullable=False,
        ),
        sa.Column("is_email_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_phone_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"], unique=False)
    op.create_index("ix_users_created_at", "users", ["created_at"], unique=False)

    op.create_table(
        "profiles",
        *_base_columns(),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("middle_name", sa.String(length=50), nullable=True),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("primary_lang", sa.Enum("ENGLISH", "URDU", name="language"), nullable=False),
        sa.Column(
            "citizen",
            sa.Enum("PAKISTANI", "NON_PAKISTANI", name="citizenship"),
            nullable=False,
        ),
        sa.Column("cnic", sa.String(length=15), nullable=False),
        sa.Column("gender", sa.Enum("MALE", "FEMALE", name="gender"), nullable=False),
        sa.Column("dob", sa.Date(), nullable=False),
        sa.Column(
            "marital_status",
            sa.Enum("MARRIED", "UNMARRIED", name="marital_status"),
            nullable=False,
        ),
        sa.Column("phone", sa.String(length=20), nullable=False),
        # Photo metadata only
        sa.Column("photo_name", sa.String(length=255), nullable=True),
        sa.Column("photo_bytes", sa.Integer(), nullable=True),
        *_owner_columns("profiles"),
    )
    op.create_index("ix_profiles_cnic", "profiles", ["cnic"], unique=True)
    op.create_index("ix_profiles_created_at", "profiles", ["created_at"], unique=False)

    op.create_table(
        "families",
        *_base_columns(),
        sa.Column("father_name", sa.String(length=100), nullable=False),
        sa.Column("mother_name", sa.String(length=100), nullable=False),
        sa.Column(
            "father_occupation",
            sa.Enum("GOVERNMENT", "NON_GOVERNMENT", name="occupation"),
            nullable=False,
        ),
        *_owner_columns("families"),
    )
    op.create_index("ix_families_created_at", "families", ["created_at"], unique=False)

    op.create_table(
        "educations",
        *_base_columns(),
        sa.Column("matric_grades", sa.String(length=200), nullable=False),
        sa.Column("matric_pic_name", sa.String(length=255), nullable=True),
        sa.Column("fsc_grades", sa.String(length=200), nullable=False),
        sa.Column("fsc_pic_name", sa.String(length=255), nullable=True),
        sa.Column("college_name", sa.String(length=200), nullable=False),
        *_owner_columns("educations"),
    )
    op.create_index("ix_educations_created_at", "educations", ["created_at"], unique=False)

    op.create_table(
        "extracurriculars",
        *_base_columns(),
        sa.Column("clubs", sa.String(length=500), nullable=False),
        sa.Column("cert_doc_name", sa.String(length=255), nullable=True),
        *_owner_columns("extracurriculars"),
    )
    op.create_index(
        "ix_extracurriculars_created_at", "extracurriculars", ["created_at"], unique=False
    )


def downgrade() -> None:
    """Drop the section tables, then users, then the enum types."""
    op.drop_index("ix_extracurriculars_created_at", table_name="extracurriculars")
    op.drop_table("extracurriculars")

    op.drop_index("ix_educations_created_at", table_name="educations")
    op.drop_table("educations")

    op.drop_index("ix_families_created_at", table_name="families")
    op.drop_table("families")

    op.drop_index("ix_profiles_created_at", table_name="profiles")
    op.drop_index("ix_profiles_cnic", table_name="profiles")
    op.drop_table("profiles")

    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")

    for enum_name in (
        "occupation",
        "marital_status",
        "gender",
        "citizenship",
        "language",
        "user_role",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
