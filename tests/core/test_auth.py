"""
Unit tests for the bearer token dependency.
"""

from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from admissions.core.auth import (
    INVALID_TOKEN_MESSAGE,
    MISSING_TOKEN_MESSAGE,
    CurrentUser,
    get_current_user,
    verify_access_token,
)
from admissions.core.exceptions import UnauthenticatedError
from admissions.core.security import create_access_token


class TestVerifyAccessToken:
    """Tests for verify_access_token."""

    @pytest.mark.asyncio
    async def test_valid_token_returns_caller(self):
        user_id = uuid4()
        token = create_access_token(
            subject=str(user_id),
            additional_claims={"email": "a@example.com", "role": "undergraduate"},
        )

        caller = await verify_access_token(token)

        assert caller == CurrentUser(id=user_id, email="a@example.com", role="undergraduate")

    @pytest.mark.asyncio
    async def test_wrong_token_type_is_rejected(self):
        token = create_access_token(subject=str(uuid4()), additional_claims={"type": "refresh"})

        with pytest.raises(UnauthenticatedError) as exc_info:
            await verify_access_token(token)

        assert exc_info.value.message == INVALID_TOKEN_MESSAGE

    @pytest.mark.asyncio
    async def test_non_uuid_subject_is_rejected(self):
        token = create_access_token(subject="not-a-uuid")

        with pytest.raises(UnauthenticatedError):
            await verify_access_token(token)

    @pytest.mark.asyncio
    async def test_garbage_token_is_rejected(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            await verify_access_token("garbage")

        assert exc_info.value.status_code == 401


class TestGetCurrentUser:
    """Tests for the get_current_user dependency."""

    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        with pytest.raises(UnauthenticatedError) as exc_info:
            await get_current_user(None)

        assert exc_info.value.message == MISSING_TOKEN_MESSAGE

    @pytest.mark.asyncio
    async def test_bearer_credentials(self):
        user_id = uuid4()
        token = create_access_token(subject=str(user_id))
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)

        caller = await get_current_user(credentials)

        assert caller.id == user_id
