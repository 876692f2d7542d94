from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from taskhub.config import ApplicationConfig


def generate_jwt(user_id: int, email: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User ID
        email: User email

    Returns:
        JWT token string (ACCESS_TOKEN_TTL_MINUTES expiry)
    """
    return create_access_token(
        user_id, email, timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_TTL_MINUTES)
    )


def create_access_token(user_id: int, email: str, expires_delta: timedelta) -> str:
    """
    Create JWT access token with custom expiry

    Args:
        user_id: User ID
        email: User email
        expires_delta: Token expiration duration (negative for already-expired tokens)

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None
