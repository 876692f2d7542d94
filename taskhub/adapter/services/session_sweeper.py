"""
Periodic purge of dead refresh tokens.

Runs as an asyncio task next to the request handlers. Each run opens its
own database session, so it shares nothing with in-flight requests except
the refresh_tokens table itself.
"""

import asyncio
import logging
from typing import Callable, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from taskhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskhub.app.use_cases.sessions import PurgeExpiredSessionsUseCase

logger = logging.getLogger(__name__)


class SessionSweeper:
    def __init__(
        self, session_factory: Callable[[], AsyncSession], interval_seconds: int
    ):
        self.session_factory = session_factory
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    async def run_once(self) -> int:
        async with self.session_factory() as session:
            use_case = PurgeExpiredSessionsUseCase(SqlAlchemyUnitOfWork(session))
            result = await use_case.execute()
        purged = result.value.purged_count
        logger.info("Session sweep purged %d expired revoked token(s)", purged)
        return purged

    async def _loop(self):
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.run_once()
            except Exception:
                # Keep sweeping; a failed run is retried at the next interval
                logger.exception("Session sweep failed")

    def start(self) -> None:
        if self.interval_seconds <= 0 or self._task is not None:
            return
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
