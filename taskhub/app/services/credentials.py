"""
Credential helpers

Three separate mechanisms, never interchanged:
- bcrypt for password hashes
- secrets.token_hex for opaque refresh tokens
- secrets.randbelow for 6-digit one-time codes
"""

import secrets
from functools import lru_cache
from typing import Optional

import bcrypt

from taskhub.config import ApplicationConfig
from taskhub.domain.errors import ValidationError

REFRESH_TOKEN_BYTES = 40
OTP_DIGITS = 6
# bcrypt only reads the first 72 bytes; newer releases reject longer input
PASSWORD_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password with bcrypt at the configured cost factor"""
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time bcrypt comparison"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash, or a password past the bcrypt limit
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("dummy_password")


def burn_password_check(password: str) -> None:
    """Spend one bcrypt comparison so unknown accounts cost the same as known ones"""
    verify_password(password, _dummy_hash())


def validate_password(password: str) -> Optional[ValidationError]:
    """Minimum length, plus the bcrypt input limit"""
    if len(password) < ApplicationConfig.PASSWORD_MIN_LENGTH:
        return ValidationError(
            "INVALID_PASSWORD",
            f"Password must be at least {ApplicationConfig.PASSWORD_MIN_LENGTH} characters long",
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return ValidationError(
            "INVALID_PASSWORD",
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes long",
        )
    return None


def generate_refresh_token() -> str:
    """80 hex chars of cryptographically secure randomness"""
    return secrets.token_hex(REFRESH_TOKEN_BYTES)


def generate_otp() -> str:
    """Six-digit numeric one-time code, never starting with 0"""
    return str(100000 + secrets.randbelow(900000))
