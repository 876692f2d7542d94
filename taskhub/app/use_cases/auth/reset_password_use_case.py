"""
Reset Password Use Case

Sets a new password from a reset code and ends every session.
"""

import logging

from taskhub.domain.errors import ValidationError
from taskhub.libs.result import Result, Return
from taskhub.app.services.credentials import hash_password, validate_password
from taskhub.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - New password must meet the minimum length
    - Code must match an active (unexpired) reset code
    - Password is hashed with bcrypt
    - Reset code is cleared (single-use)
    - All refresh tokens of the user are revoked, in the same transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code: str, new_password: str) -> Result[None]:
        """
        Execute reset password use case.

        Args:
            code: Reset code from the email
            new_password: New password to set

        Returns:
            Result with None, or ValidationError(INVALID_PASSWORD | INVALID_CODE)
        """
        password_error = validate_password(new_password)
        if password_error is not None:
            return Return.err(password_error)

        async with self.uow:
            user = await self.uow.users.get_by_reset_code(code)

            if user is None:
                return Return.err(
                    ValidationError("INVALID_CODE", "Invalid or expired reset code")
                )

            await self.uow.users.update(
                user.id,
                {
                    "password_hash": hash_password(new_password),
                    "reset_code": None,
                    "reset_expires_at": None,
                },
            )

            revoked_count = await self.uow.sessions.revoke_all_for_user(user.id)
            user_id = user.id

            await self.uow.commit()

        logger.info(
            "Password reset for user %s, %d session(s) revoked", user_id, revoked_count
        )
        return Return.ok(None)
