from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from taskhub.app.repositories.user_repository import IUserRepository
from taskhub.domain.base import utc_now
from taskhub.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_verification_code(self, code: str) -> Optional[User]:
        """Get user by unexpired verification code"""
        stmt = select(User).where(
            User.verification_code == code,
            User.verification_expires_at > utc_now(),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_reset_code(self, code: str) -> Optional[User]:
        """Get user by unexpired password reset code"""
        stmt = select(User).where(
            User.reset_code == code,
            User.reset_expires_at > utc_now(),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> Optional[User]:
        """Create a new user, or None when the email is already taken"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            # Lost a race on the unique email constraint
            await self.session.rollback()
            return None
        await self.session.refresh(user)
        return user

    async def update(self, user_id: int, fields: Dict[str, Any]) -> Optional[User]:
        """Partial update of the given columns"""
        if fields:
            stmt = update(User).where(User.id == user_id).values(**fields)
            await self.session.execute(stmt)
            await self.session.flush()
        return await self.get_by_id(user_id)

    async def mark_verified(self, user_id: int) -> None:
        """Flip is_verified and clear the verification code"""
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(
                is_verified=True,
                verification_code=None,
                verification_expires_at=None,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
