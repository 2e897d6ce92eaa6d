"""
Authentication Router

Endpoints:
- POST /auth/register - Create an account (no token is issued here)
- POST /auth/login - Exchange email + password for a 7-day access token
- GET /auth/me - The caller's account
- GET /auth/users/{role} - Accounts with a role, newest first
- POST /auth/logout - Stateless acknowledgement

Every response uses the {success, message, data, errors} envelope.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.auth import CurrentUser, get_current_user
from admissions.core.database import get_db
from admissions.core.exceptions import ServiceError
from admissions.core.responses import (
    internal_error_response,
    service_error_response,
    success_response,
)
from admissions.core.validation import validated_body
from admissions.modules.auth import service as auth_service
from admissions.modules.auth.schemas import LoginRequest
from admissions.modules.users import service as user_service
from admissions.modules.users.schemas import RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register Account",
    responses={
        400: {"description": "Validation error (every field message in `errors`)"},
        409: {"description": "An account with this email already exists"},
    },
)
async def register(
    data: RegisterRequest = Depends(validated_body(RegisterRequest)),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """
    Register a new applicant account.

    The password is bcrypt-hashed before storage. No token is returned;
    the client logs in separately.
    """
    try:
        user = await user_service.register_user(db, data)
        logger.info(f"User registered: {user.id} (role: {user.role.value})")
        return success_response(
            {"user": user},
            message="User registered successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except ServiceError as e:
        logger.warning(f"Registration rejected: {e.message}")
        return service_error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error during registration: {e}")
        return internal_error_response()


@router.post(
    "/login",
    summary="Log In",
    responses={
        400: {"description": "Validation error"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    credentials: LoginRequest = Depends(validated_body(LoginRequest)),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same 401 message.
    """
    try:
        result = await auth_service.login(db, credentials)
        return success_response(result, message="Login successful")
    except ServiceError as e:
        return service_error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error during login: {e}")
        return internal_error_response()


@router.get(
    "/me",
    summary="Current User",
    responses={
        401: {"description": "Missing, invalid or expired token"},
        404: {"description": "Account no longer exists"},
    },
)
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """Return the authenticated caller's account."""
    try:
        user = await user_service.get_user(db, current_user.id)
        return success_response({"user": user})
    except ServiceError as e:
        return service_error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error loading current user: {e}")
        return internal_error_response()


@router.get(
    "/users/{role}",
    summary="List Users by Role",
    responses={
        400: {"description": "Unknown role"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def list_users_by_role(
    role: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """List accounts with the given role (undergraduate or graduate), newest first."""
    try:
        users = await user_service.list_users_by_role(db, role)
        return success_response({"users": users})
    except ServiceError as e:
        logger.warning(f"List users rejected for {current_user.id}: {e.message}")
        return service_error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error listing users by role: {e}")
        return internal_error_response()


@router.post(
    "/logout",
    summary="Log Out",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def logout(current_user: CurrentUser = Depends(get_current_user)) -> JSONResponse:
    """
    Acknowledge a logout.

    Tokens are not revoked server-side; the client discards its token and it
    stays valid until it expires.
    """
    logger.info(f"User logged out: {current_user.id}")
    return success_response(message="Logged out successfully")
