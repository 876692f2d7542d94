"""
RefreshToken Entity

One persisted login session (one device).
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskhub.domain.base import utc_now


class RefreshToken(SQLModel, table=True):
    """
    RefreshToken entity - one row per login session.

    Business Rules:
    - Token value is unique and never reused
    - Once revoked a token is never un-revoked
    - Rotation revokes the old row and points replaced_by_token at the new one
    - Rows are purged only when both expired and revoked
    """

    __tablename__ = "refresh_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)
    token: str = Field(unique=True, index=True, max_length=128)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    revoked: bool = Field(default=False)
    replaced_by_token: Optional[str] = Field(default=None, max_length=128)

    # Device tracking
    device_name: Optional[str] = Field(default=None, max_length=255)
    device_type: Optional[str] = Field(default=None, max_length=32)
    browser: Optional[str] = Field(default=None, max_length=64)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    last_used_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_refresh_token_expires_at", "expires_at"),
        Index("idx_refresh_token_user_revoked", "user_id", "revoked"),
    )
