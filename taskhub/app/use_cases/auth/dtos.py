"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Register command - validated registration intent"""

    name: str
    email: str
    password: str


class ClientContext(BaseModel):
    """Request metadata used for device-aware login"""

    user_agent: Optional[str] = None
    ip_address: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user information (never carries the password hash)"""

    id: int
    name: str
    email: str
    is_verified: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user) -> "UserInfo":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_verified=user.is_verified,
            created_at=user.created_at,
        )


class RegisterResponse(BaseModel):
    """
    Register response

    verification_code is returned for callers and tests; the HTTP layer
    does not expose it, it only travels by email.
    """

    user: UserInfo
    verification_code: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    refresh_token: str
    user: UserInfo


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str


class TokenPayload(BaseModel):
    """Validated access token claims"""

    user_id: int
    email: str
