"""Password hashing and access tokens."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from teamtasks.config import Settings, settings as default_settings
from teamtasks.errors import UnauthenticatedError
from teamtasks.models.user import User, UserRole

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid JWT Token"

# bcrypt only reads the first 72 bytes of a secret
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or default_settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_secret_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_secret_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def create_access_token(
    user: User,
    settings: Settings = default_settings,
    expires_delta: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    """Sign a token whose subject is the user id and which carries the user's role."""
    issued_at = now or datetime.now(timezone.utc)
    expires_delta = expires_delta or timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    role = user.role.value if isinstance(user.role, UserRole) else str(user.role)
    payload = {
        "sub": str(user.id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings = default_settings) -> Dict[str, Any]:
    """Return the token claims; every failure yields the same UnauthenticatedError."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "role", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected expired access token")
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE)
    except jwt.PyJWTError as exc:
        logger.warning("Rejected access token: %s", exc)
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE)
