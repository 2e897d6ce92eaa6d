"""
User Repository

Database operations for user accounts.
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.modules.users.models import User, UserRole

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        email: str,
        password_hash: str,
        full_name: str,
        dob: date,
        phone: str,
        address: str,
        role: UserRole,
    ) -> User:
        """
        Create and commit a new user record.

        Args:
            db: Database session
            email: User's email address (unique, already lower-cased)
            password_hash: bcrypt hash of the password
            full_name: User's full name
            dob: Date of birth
            phone: Phone number
            address: Postal address
            role: User's role

        Returns:
            Created User instance

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already taken
        """
        user = User(
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            dob=dob,
            phone=phone,
            address=address,
            role=role,
        )

        db.add(user)
        await db.commit()
        await db.refresh(user)

        logger.info(f"Created user: {user.id} ({user.role.value})")
        return user

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: str | UUID) -> User | None:
        """
        Get a user by ID.

        Returns:
            User instance or None if not found
        """
        if isinstance(user_id, str):
            user_id = UUID(user_id)
        return await db.get(User, user_id)

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> User | None:
        """
        Get a user by email address (case-insensitive).

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalar_one_or_none()

    @staticmethod
    async def email_exists(db: AsyncSession, email: str) -> bool:
        """Check if an email address is already registered."""
        user = await UserRepository.get_by_email(db, email)
        return user is not None

    @staticmethod
    async def list_by_role(db: AsyncSession, role: UserRole) -> list[User]:
        """
        List users with the given role, newest first.

        Args:
            db: Database session
            role: Role to filter by

        Returns:
            Users ordered by created_at descending
        """
        result = await db.execute(
            select(User).where(User.role == role).order_by(User.created_at.desc())
        )
        return list(result.scalars().all())
