# quillblog/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from werkzeug.security import generate_password_hash, check_password_hash

from quillblog.core.config import settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def get_password_hash(password: str) -> str:
    return generate_password_hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return check_password_hash(hashed_password, plain_password)


def create_access_token(user_id: int, username: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed, time-limited bearer token for a user.

    Args:
        user_id: ID of the authenticated user, stored as the ``sub`` claim
        username: Username, carried for client display only
        expires_delta: Lifetime override; defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        str: The encoded JWT
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(user_id),
        "username": username,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY.get_secret_value(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token claims, or None if the token is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[ALGORITHM])
        payload["sub"] = int(payload["sub"])
        return payload
    except (jwt.PyJWTError, KeyError, ValueError) as e:
        logger.warning(f"Rejected access token: {str(e)}")
        return None
