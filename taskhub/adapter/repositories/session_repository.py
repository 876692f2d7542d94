from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from taskhub.app.repositories.session_repository import ISessionRepository
from taskhub.domain.base import utc_now
from taskhub.domain.entities import DeviceInfo, RefreshToken


class SessionRepository(ISessionRepository):
    """Refresh token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        token: str,
        user_id: int,
        expires_at: datetime,
        device_info: Optional[DeviceInfo] = None,
    ) -> RefreshToken:
        """Create a new refresh token row"""
        device_info = device_info or DeviceInfo()
        now = utc_now()
        refresh_token = RefreshToken(
            token=token,
            user_id=user_id,
            expires_at=expires_at,
            created_at=now,
            last_used_at=now,
            device_name=device_info.device_name,
            device_type=device_info.device_type,
            browser=device_info.browser,
            ip_address=device_info.ip_address,
        )
        self.session.add(refresh_token)
        await self.session.flush()
        await self.session.refresh(refresh_token)
        return refresh_token

    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get refresh token by value"""
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, session_id: int) -> Optional[RefreshToken]:
        """Get refresh token by ID"""
        stmt = select(RefreshToken).where(RefreshToken.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update_last_used(self, token: str) -> None:
        """Stamp last_used_at"""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token == token)
            .values(last_used_at=utc_now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def revoke(self, token: str, replaced_by_token: Optional[str] = None) -> bool:
        """
        Conditional revoke (check-and-set).

        The revoked == False predicate makes two concurrent rotations of the
        same token resolve to a single winner.
        """
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token == token, RefreshToken.revoked == False)
            .values(revoked=True, replaced_by_token=replaced_by_token)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def revoke_all_for_user(self, user_id: int) -> int:
        """Revoke all unrevoked tokens for a user"""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.user_id == user_id, RefreshToken.revoked == False)
            .values(revoked=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def revoke_all_except(self, user_id: int, keep_token: str) -> int:
        """Revoke all unrevoked tokens for a user except keep_token"""
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.user_id == user_id,
                RefreshToken.token != keep_token,
                RefreshToken.revoked == False,
            )
            .values(revoked=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def list_active_for_user(self, user_id: int) -> List[RefreshToken]:
        """Unrevoked, unexpired tokens, newest-used first"""
        stmt = (
            select(RefreshToken)
            .where(
                RefreshToken.user_id == user_id,
                RefreshToken.revoked == False,
                RefreshToken.expires_at > utc_now(),
            )
            .order_by(RefreshToken.last_used_at.desc(), RefreshToken.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def purge_expired_revoked(self) -> int:
        """Delete tokens that are expired and revoked"""
        stmt = delete(RefreshToken).where(
            RefreshToken.expires_at < utc_now(),
            RefreshToken.revoked == True,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
