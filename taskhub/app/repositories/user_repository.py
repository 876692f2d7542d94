from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from taskhub.domain.entities import User


class IUserRepository(ABC):
    """User (credential store) repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_verification_code(self, code: str) -> Optional[User]:
        """Get user holding this verification code, only if it has not expired"""
        pass

    @abstractmethod
    async def get_by_reset_code(self, code: str) -> Optional[User]:
        """Get user holding this password reset code, only if it has not expired"""
        pass

    @abstractmethod
    async def create(self, user: User) -> Optional[User]:
        """
        Create a new user. Email uniqueness is enforced by the store:
        returns None when another row already holds the email.
        """
        pass

    @abstractmethod
    async def update(self, user_id: int, fields: Dict[str, Any]) -> Optional[User]:
        """Partial update. Keys absent from fields are left unchanged."""
        pass

    @abstractmethod
    async def mark_verified(self, user_id: int) -> None:
        """Set is_verified and clear the verification code and expiry"""
        pass
