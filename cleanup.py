"""
One-shot purge of refresh tokens that are both expired and revoked.

Meant for cron when the in-process sweeper is disabled
(SESSION_PURGE_INTERVAL_SECONDS: 0).
"""

import asyncio
import logging

from taskhub.config import ApplicationConfig
from taskhub.adapter.services.session_sweeper import SessionSweeper
from taskhub.depends import AsyncSessionLocal, engine


async def main():
    sweeper = SessionSweeper(AsyncSessionLocal, interval_seconds=0)
    try:
        await sweeper.run_once()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)
    asyncio.run(main())
