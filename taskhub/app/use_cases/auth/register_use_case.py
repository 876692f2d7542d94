"""
Register Use Case

Creates an unverified account and emails a verification code.
"""

import logging
from datetime import timedelta

from taskhub.config import ApplicationConfig
from taskhub.domain.base import utc_now
from taskhub.domain.entities import NotificationKind, User
from taskhub.domain.errors import DeliveryError, ValidationError
from taskhub.libs.result import Result, Return
from taskhub.app.services.credentials import hash_password, validate_password
from taskhub.app.services.notifier import NotificationError, Notifier
from taskhub.app.services.unit_of_work import UnitOfWork
from .dtos import RegisterCommand, RegisterResponse, UserInfo
from .otp import generate_unique_verification_code

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS = ValidationError(
    "EMAIL_ALREADY_EXISTS", "User with this email already exists"
)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate password length (minimum, and the bcrypt byte limit)
    2. Reject an email that is already registered (the store's unique
       constraint settles concurrent registrations)
    3. Hash password with bcrypt
    4. Generate 6-digit verification code (24 hour expiry)
    5. Create User with is_verified=False and commit
    6. Send verification email (awaited)
    7. Return public user + code

    The user row is committed before the email goes out. If delivery
    fails the account stays unverified and resend_verification can
    complete it.
    """

    def __init__(self, uow: UnitOfWork, notifier: Notifier):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password

        Returns:
            Result[RegisterResponse], or
            ValidationError(INVALID_PASSWORD | EMAIL_ALREADY_EXISTS),
            DeliveryError(EMAIL_DELIVERY_FAILED)
        """
        password_error = validate_password(command.password)
        if password_error is not None:
            return Return.err(password_error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(EMAIL_ALREADY_EXISTS)

            verification_code = await generate_unique_verification_code(self.uow)

            user = User(
                name=command.name,
                email=command.email,
                password_hash=hash_password(command.password),
                is_verified=False,
                verification_code=verification_code,
                verification_expires_at=utc_now()
                + timedelta(hours=ApplicationConfig.VERIFICATION_CODE_TTL_HOURS),
            )
            user = await self.uow.users.create(user)
            if user is None:
                # A concurrent registration committed the same email first
                return Return.err(EMAIL_ALREADY_EXISTS)
            user_info = UserInfo.from_user(user)

            await self.uow.commit()

        logger.info("Registered user %s", user_info.id)

        try:
            await self.notifier.send(
                user_info.email,
                NotificationKind.verification,
                verification_code,
                name=user_info.name,
            )
        except NotificationError:
            logger.error("Verification email for user %s was not delivered", user_info.id)
            return Return.err(
                DeliveryError("EMAIL_DELIVERY_FAILED", "Failed to send verification email")
            )

        return Return.ok(
            RegisterResponse(user=user_info, verification_code=verification_code)
        )
