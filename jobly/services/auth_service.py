"""Authentication service for JWT token management and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import JWTError, jwt

from jobly.services.access_policy import Identity
from jobly.settings import settings
from jobly.utils import get_logger

logger = get_logger(__name__)


def create_access_token(user: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """Create JWT access token for a user row.

    Args:
        user: Mapping with at least ``username`` and ``isAdmin``
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)

    to_encode = {
        "username": user["username"],
        "isAdmin": bool(user.get("isAdmin", False)),
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str | None) -> Identity | None:
    """Turn a bearer token into an Identity.

    Missing, malformed, expired or badly signed tokens all yield None so the
    request proceeds as anonymous.

    Args:
        token: JWT token string

    Returns:
        Identity if the token is valid, None otherwise
    """
    if not token:
        return None

    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"JWT verification failed: {e}")
        return None

    username = payload.get("username")
    if not isinstance(username, str) or not username:
        logger.warning("JWT payload has no username claim")
        return None

    return Identity(username=username, is_admin=payload.get("isAdmin", False))


def get_password_hash(password: str) -> str:
    """Hash password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash.

    Args:
        plain_password: Plain text password
        hashed_password: Bcrypt hashed password

    Returns:
        True if password matches, False otherwise
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification error: {e}")
        return False
