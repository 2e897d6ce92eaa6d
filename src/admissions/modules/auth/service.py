"""
Authentication Service

Credential checks and token issuance. Login failures always raise the same
InvalidCredentialsError so callers cannot tell whether an email exists.
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.exceptions import InvalidCredentialsError
from admissions.core.security import (
    create_access_token,
    verify_dummy_password,
    verify_password,
)
from admissions.modules.auth.schemas import LoginRequest, LoginResponse
from admissions.modules.users.models import User
from admissions.modules.users.repository import UserRepository
from admissions.modules.users.schemas import UserResponse

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Create an access token embedding the user's id, email and role."""
    return create_access_token(
        subject=str(user.id),
        additional_claims={
            "email": user.email,
            "role": user.role.value,
        },
    )


async def login(db: AsyncSession, credentials: LoginRequest) -> LoginResponse:
    """
    Authenticate a user and issue an access token.

    Args:
        db: Database session
        credentials: Validated email and password

    Returns:
        The sanitized user and a bearer token

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
    """
    user = await UserRepository.get_by_email(db, credentials.email)

    if user is None:
        # Same bcrypt cost as a real check
        await run_in_threadpool(verify_dummy_password, credentials.password)
        logger.warning("Login attempt for non-existent account")
        raise InvalidCredentialsError()

    if not await run_in_threadpool(verify_password, credentials.password, user.password_hash):
        logger.warning(f"Invalid password for user: {user.id}")
        raise InvalidCredentialsError()

    token = issue_token(user)
    logger.info(f"User logged in: {user.id} (role: {user.role.value})")

    return LoginResponse(user=UserResponse.model_validate(user), token=token)
