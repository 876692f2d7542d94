"""
Login Use Case

Handles credential authentication and issues access + refresh tokens.
"""

import logging
from datetime import timedelta
from typing import Optional

from taskhub.config import ApplicationConfig
from taskhub.domain.base import utc_now
from taskhub.domain.errors import AuthenticationError
from taskhub.libs.result import Result, Return
from taskhub.api.utils.jwt import generate_jwt
from taskhub.app.services.credentials import (
    burn_password_check,
    generate_refresh_token,
    verify_password,
)
from taskhub.app.services.device_info import extract_device_info
from taskhub.app.services.unit_of_work import UnitOfWork
from .dtos import ClientContext, LoginResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules (checked in this order):
    - User must exist (generic INVALID_CREDENTIALS otherwise)
    - User must be verified (EMAIL_NOT_VERIFIED); checked before the
      password so no hash comparison is spent on an account that
      cannot log in
    - Constant-time password comparison (same INVALID_CREDENTIALS as
      an unknown email, no enumeration)
    - Creates a refresh token session (30 days), tagged with device
      info when a client context is supplied
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        email: str,
        password: str,
        client: Optional[ClientContext] = None,
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password
            client: Optional request metadata for device tracking

        Returns:
            Result with LoginResponse, or AuthenticationError
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Keep response time close to the known-user path
                burn_password_check(password)
                logger.warning("Login failed: unknown email")
                return Return.err(
                    AuthenticationError(
                        "INVALID_CREDENTIALS", "Invalid email or password"
                    )
                )

            if not user.is_verified:
                return Return.err(
                    AuthenticationError(
                        "EMAIL_NOT_VERIFIED",
                        "Email not verified. Please verify your email before logging in.",
                    )
                )

            if not verify_password(password, user.password_hash):
                logger.warning("Login failed: wrong password for user %s", user.id)
                return Return.err(
                    AuthenticationError(
                        "INVALID_CREDENTIALS", "Invalid email or password"
                    )
                )

            device_info = None
            if client is not None:
                device_info = extract_device_info(client.user_agent, client.ip_address)

            refresh_token = generate_refresh_token()
            await self.uow.sessions.create(
                refresh_token,
                user.id,
                utc_now() + timedelta(days=ApplicationConfig.REFRESH_TOKEN_TTL_DAYS),
                device_info=device_info,
            )

            user_info = UserInfo.from_user(user)
            await self.uow.commit()

            access_token = generate_jwt(user_info.id, user_info.email)

            logger.info("User %s logged in", user_info.id)
            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    refresh_token=refresh_token,
                    user=user_info,
                )
            )
