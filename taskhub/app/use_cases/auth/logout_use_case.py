"""
Logout Use Case

Revokes the presented refresh token.
"""

import logging
from typing import Optional

from taskhub.libs.result import Result, Return
from taskhub.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logout.

    Idempotent: unknown or already revoked tokens are not an error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: Optional[str]) -> Result[None]:
        if not refresh_token:
            return Return.ok(None)

        async with self.uow:
            revoked = await self.uow.sessions.revoke(refresh_token)
            await self.uow.commit()

        if revoked:
            logger.info("Refresh token revoked on logout")
        return Return.ok(None)
