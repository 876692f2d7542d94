"""
Resend Verification Email Use Case

Issues a fresh verification code and emails it again.
"""

import logging
from datetime import timedelta

from taskhub.config import ApplicationConfig
from taskhub.domain.base import utc_now
from taskhub.domain.entities import NotificationKind
from taskhub.domain.errors import DeliveryError, NotFoundError, ValidationError
from taskhub.libs.result import Result, Return
from taskhub.app.services.notifier import NotificationError, Notifier
from taskhub.app.services.unit_of_work import UnitOfWork
from .otp import generate_unique_verification_code

logger = logging.getLogger(__name__)


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - User must exist (NotFoundError)
    - User must not already be verified (ValidationError)
    - New code replaces the old one; expiry reset to 24 hours from now
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, email: str) -> Result[None]:
        """
        Execute resend verification email use case.

        Args:
            email: User's email address

        Returns:
            Result with None, or NotFoundError(USER_NOT_FOUND),
            ValidationError(ALREADY_VERIFIED), DeliveryError(EMAIL_DELIVERY_FAILED)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.err(NotFoundError("USER_NOT_FOUND", "User not found"))

            if user.is_verified:
                return Return.err(
                    ValidationError("ALREADY_VERIFIED", "Email already verified")
                )

            verification_code = await generate_unique_verification_code(self.uow)
            await self.uow.users.update(
                user.id,
                {
                    "verification_code": verification_code,
                    "verification_expires_at": utc_now()
                    + timedelta(hours=ApplicationConfig.VERIFICATION_CODE_TTL_HOURS),
                },
            )
            user_id, user_email, user_name = user.id, user.email, user.name
            await self.uow.commit()

        try:
            await self.notifier.send(
                user_email,
                NotificationKind.verification,
                verification_code,
                name=user_name,
            )
        except NotificationError:
            logger.error("Verification email for user %s was not delivered", user_id)
            return Return.err(
                DeliveryError("EMAIL_DELIVERY_FAILED", "Failed to send verification email")
            )

        return Return.ok(None)
