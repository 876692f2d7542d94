"""
Request Password Reset Use Case

Generates and emails a password reset code.
"""

import logging
from datetime import timedelta

from taskhub.config import ApplicationConfig
from taskhub.domain.base import utc_now
from taskhub.domain.entities import NotificationKind
from taskhub.domain.errors import DeliveryError
from taskhub.libs.result import Result, Return
from taskhub.app.services.notifier import NotificationError, Notifier
from taskhub.app.services.unit_of_work import UnitOfWork
from .otp import generate_unique_reset_code

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Unknown email: silent success, nothing written or sent (no enumeration)
    - 6-digit reset code, expires in RESET_CODE_TTL_HOURS (1 hour)
    - A new request supersedes any previous reset code
    - Code committed before the email is sent
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, email: str) -> Result[None]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with None, or DeliveryError(EMAIL_DELIVERY_FAILED)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(None)

            reset_code = await generate_unique_reset_code(self.uow)
            await self.uow.users.update(
                user.id,
                {
                    "reset_code": reset_code,
                    "reset_expires_at": utc_now()
                    + timedelta(hours=ApplicationConfig.RESET_CODE_TTL_HOURS),
                },
            )
            user_id, user_email, user_name = user.id, user.email, user.name
            await self.uow.commit()

        try:
            await self.notifier.send(
                user_email,
                NotificationKind.password_reset,
                reset_code,
                name=user_name,
            )
        except NotificationError:
            logger.error("Password reset email for user %s was not delivered", user_id)
            return Return.err(
                DeliveryError("EMAIL_DELIVERY_FAILED", "Failed to send password reset email")
            )

        logger.info("Password reset requested for user %s", user_id)
        return Return.ok(None)
