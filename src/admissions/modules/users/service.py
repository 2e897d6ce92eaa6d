"""
User Service Layer

Registration and user lookups. Passwords are bcrypt-hashed in the threadpool
before they reach the repository; no returned view carries the hash.
"""

import logging
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.exceptions import (
    DuplicateIdentityError,
    InvalidRoleError,
    NotFoundError,
)
from admissions.core.security import hash_password
from admissions.modules.users.models import UserRole
from admissions.modules.users.repository import UserRepository
from admissions.modules.users.schemas import RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"


async def register_user(db: AsyncSession, data: RegisterRequest) -> UserResponse:
    """
    Create a new account.

    Args:
        db: Database session
        data: Validated registration data (email already lower-cased)

    Returns:
        The sanitized user

    Raises:
        DuplicateIdentityError: If the email is already registered
    """
    email = data.email.lower()

    if await UserRepository.email_exists(db, email):
        raise DuplicateIdentityError()

    password_hash = await run_in_threadpool(hash_password, data.password)

    try:
        user = await UserRepository.create(
            db,
            email=email,
            password_hash=password_hash,
            full_name=data.full_name,
            dob=data.dob,
            phone=data.phone,
            address=data.address,
            role=data.role,
        )
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        await db.rollback()
        logger.warning("Concurrent registration hit the unique email constraint")
        raise DuplicateIdentityError() from e

    return UserResponse.model_validate(user)


async def get_user(db: AsyncSession, user_id: UUID) -> UserResponse:
    """
    Get a sanitized user by ID.

    Raises:
        NotFoundError: If the user no longer exists
    """
    user = await UserRepository.get_by_id(db, user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND_MESSAGE)
    return UserResponse.model_validate(user)


def parse_role(role: str) -> UserRole:
    """
    Parse a role string.

    Raises:
        InvalidRoleError: If the role is not one of the known values
    """
    try:
        return UserRole(role)
    except ValueError as e:
        raise InvalidRoleError() from e


async def list_users_by_role(db: AsyncSession, role: str) -> list[UserResponse]:
    """
    List sanitized users with the given role, newest first.

    Raises:
        InvalidRoleError: If the role is not one of the known values
    """
    user_role = parse_role(role)
    users = await UserRepository.list_by_role(db, user_role)
    return [UserResponse.model_validate(user) for user in users]
