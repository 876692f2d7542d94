from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from taskhub.domain.entities import DeviceInfo, RefreshToken


class ISessionRepository(ABC):
    """Refresh token (session store) repository interface - application layer"""

    @abstractmethod
    async def create(
        self,
        token: str,
        user_id: int,
        expires_at: datetime,
        device_info: Optional[DeviceInfo] = None,
    ) -> RefreshToken:
        """Persist a new refresh token. Token uniqueness is enforced by the store."""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get refresh token by value, whatever its revoked/expired state"""
        pass

    @abstractmethod
    async def get_by_id(self, session_id: int) -> Optional[RefreshToken]:
        """Get refresh token by ID"""
        pass

    @abstractmethod
    async def update_last_used(self, token: str) -> None:
        """Stamp last_used_at with the current time"""
        pass

    @abstractmethod
    async def revoke(self, token: str, replaced_by_token: Optional[str] = None) -> bool:
        """
        Revoke a token only if it is still unrevoked.

        Returns True when this call performed the revocation, False when the
        token does not exist or was already revoked.
        """
        pass

    @abstractmethod
    async def revoke_all_for_user(self, user_id: int) -> int:
        """Revoke every unrevoked token of a user. Returns count."""
        pass

    @abstractmethod
    async def revoke_all_except(self, user_id: int, keep_token: str) -> int:
        """Revoke every unrevoked token of a user except keep_token. Returns count."""
        pass

    @abstractmethod
    async def list_active_for_user(self, user_id: int) -> List[RefreshToken]:
        """Unrevoked, unexpired tokens of a user, most recently used first"""
        pass

    @abstractmethod
    async def purge_expired_revoked(self) -> int:
        """Delete tokens that are both expired and revoked. Returns count."""
        pass
