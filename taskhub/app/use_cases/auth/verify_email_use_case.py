"""
Verify Email Use Case

Handles email verification via 6-digit code.
"""

import logging

from taskhub.domain.errors import ValidationError
from taskhub.libs.result import Result, Return
from taskhub.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Code must match a user's active (unexpired) verification code
    - Sets is_verified = True
    - Clears verification code and expiry (single-use)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code: str) -> Result[None]:
        """
        Execute email verification use case.

        Args:
            code: Verification code from the email

        Returns:
            Result with None, or ValidationError(INVALID_CODE)
        """
        async with self.uow:
            # The store only matches unexpired codes
            user = await self.uow.users.get_by_verification_code(code)

            if user is None:
                return Return.err(
                    ValidationError(
                        "INVALID_CODE", "Invalid or expired verification code"
                    )
                )

            await self.uow.users.mark_verified(user.id)
            await self.uow.commit()

            logger.info("Email verified for user %s", user.id)
            return Return.ok(None)
