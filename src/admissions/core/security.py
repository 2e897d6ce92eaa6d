"""
Security Utilities

Password hashing (bcrypt) and JWT access tokens (python-jose).

These are plain synchronous functions. bcrypt is slow, so
async callers should run hash_password / verify_password in the threadpool.
"""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
from jose import JWTError, jwt

from admissions.core.config import get_settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72

ACCESS_TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh bcrypt salt.

    Args:
        password: Plain text password (at most 72 UTF-8 bytes)

    Returns:
        The bcrypt hash as a string
    """
    rounds = get_settings().bcrypt_rounds
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """
    Check a candidate password against a stored bcrypt hash.

    Never raises: malformed hashes and over-long candidates return False.
    """
    candidate = plain_password.encode("utf-8")
    if len(candidate) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


@lru_cache
def get_dummy_password_hash() -> str:
    """Hash compared against when no account exists, so both login paths cost the same."""
    return hash_password("dummy-password-for-timing")


def verify_dummy_password(plain_password: str) -> bool:
    """Spend one bcrypt check on the dummy hash. Always returns False."""
    verify_password(plain_password, get_dummy_password_hash())
    return False


def create_access_token(
    subject: str,
    additional_claims: dict[str, Any] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        subject: Value of the "sub" claim (the user id)
        additional_claims: Extra claims to embed (email, role)
        expires_delta: Lifetime override; defaults to ACCESS_TOKEN_EXPIRE_DAYS

    Returns:
        Encoded JWT
    """
    settings = get_settings()
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(days=settings.access_token_expire_days))

    payload: dict[str, Any] = {
        "sub": subject,
        "type": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": expire,
    }
    if additional_claims:
        payload.update(additional_claims)

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any] | None:
    """
    Decode and verify a JWT.

    Checks the signature, the algorithm and the expiry.

    Returns:
        The claims, or None if the token is invalid or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug(f"Token rejected: {e}")
        return None
