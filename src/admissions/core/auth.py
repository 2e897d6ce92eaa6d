"""
Authentication Module

Provides the authentication dependency for FastAPI endpoints. It validates
the bearer JWT and attaches the caller identity (CurrentUser) to the request.

The token is the only source of identity: no database lookup happens here,
and a token stays valid until it expires (there is no revocation list).
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from admissions.core.exceptions import UnauthenticatedError
from admissions.core.security import ACCESS_TOKEN_TYPE, decode_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our own 401 envelope
security = HTTPBearer(
    auto_error=False,
    description="JWT Bearer token for authentication",
)

MISSING_TOKEN_MESSAGE = "Access token is required"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass
class CurrentUser:
    """
    The authenticated caller, populated from JWT claims.

    Attributes:
        id: User's unique identifier
        email: User's email address
        role: User's role (undergraduate or graduate)
    """

    id: UUID
    email: str
    role: str

    def __str__(self) -> str:
        return f"CurrentUser(id={self.id}, email={self.email}, role={self.role})"


async def verify_access_token(token: str) -> CurrentUser:
    """
    Verify a JWT and extract the caller identity.

    Decoding runs in the threadpool so the event loop stays free.

    Raises:
        UnauthenticatedError: If the token is invalid, expired, of the wrong
            type, or missing claims
    """
    payload = await run_in_threadpool(decode_token, token)

    if payload is None:
        logger.warning("Invalid or expired JWT token")
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE)

    token_type = payload.get("type", ACCESS_TOKEN_TYPE)
    if token_type != ACCESS_TOKEN_TYPE:
        logger.warning(f"Invalid token type: {token_type}")
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE)

    try:
        user_id_str = payload.get("sub")
        if not user_id_str:
            raise ValueError("Missing 'sub' claim in token")

        return CurrentUser(
            id=UUID(user_id_str),
            email=payload.get("email", ""),
            role=payload.get("role", ""),
        )
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid token claims: {e}")
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE) from e


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> CurrentUser:
    """
    FastAPI dependency that validates the bearer token and returns the caller.

    Usage:
        @router.get("/me")
        async def me(user: CurrentUser = Depends(get_current_user)):
            # user.id, user.email, user.role are available

    Raises:
        UnauthenticatedError: If the token is missing, invalid, or expired
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError(MISSING_TOKEN_MESSAGE)

    user = await verify_access_token(credentials.credentials)
    logger.debug(f"Authenticated caller: {user.id}")
    return user


__all__ = [
    "CurrentUser",
    "get_current_user",
    "verify_access_token",
]
