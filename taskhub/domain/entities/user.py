"""
User Entity

Identity and credential record.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskhub.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - identity plus credential state.

    Business Rules:
    - Email must be unique across all users (exact match)
    - Password stored as bcrypt hash, never plain text
    - Created unverified; login requires is_verified=True
    - Verification and reset codes are cleared once consumed
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Email verification
    is_verified: bool = Field(default=False)
    verification_code: Optional[str] = Field(default=None, index=True, max_length=6)
    verification_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Password reset
    reset_code: Optional[str] = Field(default=None, index=True, max_length=6)
    reset_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_is_verified", "is_verified"),)
