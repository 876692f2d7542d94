"""
Session Use Cases

Session introspection and revocation for the signed-in user.
"""

import logging
from typing import List

from taskhub.domain.base import utc_now
from taskhub.domain.errors import NotFoundError
from taskhub.libs.result import Result, Return
from taskhub.app.services.unit_of_work import UnitOfWork
from .dtos import PurgeSessionsResponse, RevokeSessionsResponse, SessionInfo

logger = logging.getLogger(__name__)

SESSION_NOT_FOUND = NotFoundError("SESSION_NOT_FOUND", "Session not found")


def _is_active(token) -> bool:
    return not token.revoked and token.expires_at > utc_now()


class ListActiveSessionsUseCase:
    """Unrevoked, unexpired sessions of a user, most recently used first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[List[SessionInfo]]:
        async with self.uow:
            tokens = await self.uow.sessions.list_active_for_user(user_id)
            return Return.ok([SessionInfo.from_refresh_token(t) for t in tokens])


class RevokeSessionUseCase:
    """
    Revoke one of the caller's own sessions.

    Business Rules:
    - Missing, foreign, revoked and expired sessions all return
      SESSION_NOT_FOUND; a non-owner learns nothing about the id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)

            if session is None or session.user_id != user_id or not _is_active(session):
                return Return.err(SESSION_NOT_FOUND)

            await self.uow.sessions.revoke(session.token)
            await self.uow.commit()

        logger.info("User %s revoked session %s", user_id, session_id)
        return Return.ok(None)


class RevokeAllOtherSessionsUseCase:
    """
    Log out every other device.

    Business Rules:
    - current_token must be an active session of the caller; it survives
    - Every other unrevoked session of the caller is revoked
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: int, current_token: str
    ) -> Result[RevokeSessionsResponse]:
        async with self.uow:
            current = await self.uow.sessions.get_by_token(current_token)

            if current is None or current.user_id != user_id or not _is_active(current):
                return Return.err(
                    NotFoundError("SESSION_NOT_FOUND", "Current session not found")
                )

            count = await self.uow.sessions.revoke_all_except(user_id, current_token)
            await self.uow.commit()

        logger.info("User %s revoked %d other session(s)", user_id, count)
        return Return.ok(RevokeSessionsResponse(revoked_count=count))


class PurgeExpiredSessionsUseCase:
    """
    Delete refresh tokens that are both expired and revoked.

    Revoked-but-unexpired rows are kept so replays can still be recognized.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PurgeSessionsResponse]:
        async with self.uow:
            count = await self.uow.sessions.purge_expired_revoked()
            await self.uow.commit()

        return Return.ok(PurgeSessionsResponse(purged_count=count))
