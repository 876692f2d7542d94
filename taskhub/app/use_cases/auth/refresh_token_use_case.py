"""
Refresh Token Use Case

Issues a new access token and rotates the refresh token once it
nears expiry (sliding window renewal).
"""

import logging
from datetime import timedelta

from taskhub.config import ApplicationConfig
from taskhub.domain.base import utc_now
from taskhub.domain.entities import DeviceInfo
from taskhub.domain.errors import AuthenticationError
from taskhub.libs.result import Result, Return
from taskhub.api.utils.jwt import generate_jwt
from taskhub.app.services.credentials import generate_refresh_token
from taskhub.app.services.unit_of_work import UnitOfWork
from .dtos import RefreshTokenResponse

logger = logging.getLogger(__name__)

REVOKED_ERROR = AuthenticationError(
    "REFRESH_TOKEN_REVOKED", "Refresh token has been revoked"
)


class RefreshTokenUseCase:
    """
    Use case for refreshing access tokens.

    Business Rules:
    - Unknown, revoked and expired tokens are rejected, each with its own code
    - Owning user must still exist
    - last_used_at is stamped on every successful refresh
    - A new access token is always issued
    - Rotation only when less than REFRESH_ROTATION_THRESHOLD_DAYS remain:
      new token created first, then the old one conditionally revoked
      with replaced_by_token set; otherwise the same token is returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        """
        Execute refresh token use case.

        Args:
            refresh_token: The refresh token presented by the client

        Returns:
            Result with RefreshTokenResponse, or AuthenticationError
        """
        async with self.uow:
            stored = await self.uow.sessions.get_by_token(refresh_token)

            if stored is None:
                logger.info("Refresh rejected: unknown token")
                return Return.err(
                    AuthenticationError("INVALID_REFRESH_TOKEN", "Invalid refresh token")
                )

            if stored.revoked:
                # Replay of a revoked (possibly rotated) token may mean theft
                logger.warning(
                    "Refresh rejected: revoked token %s presented for user %s (rotated=%s)",
                    stored.id,
                    stored.user_id,
                    stored.replaced_by_token is not None,
                )
                return Return.err(REVOKED_ERROR)

            now = utc_now()
            if stored.expires_at <= now:
                return Return.err(
                    AuthenticationError(
                        "REFRESH_TOKEN_EXPIRED", "Refresh token has expired"
                    )
                )

            user = await self.uow.users.get_by_id(stored.user_id)
            if user is None:
                return Return.err(AuthenticationError("USER_NOT_FOUND", "User not found"))

            await self.uow.sessions.update_last_used(refresh_token)

            access_token = generate_jwt(user.id, user.email)
            next_refresh_token = refresh_token

            rotation_threshold = timedelta(
                days=ApplicationConfig.REFRESH_ROTATION_THRESHOLD_DAYS
            )
            if stored.expires_at - now < rotation_threshold:
                next_refresh_token = generate_refresh_token()

                # Create before revoke: the old token stays usable if this fails
                await self.uow.sessions.create(
                    next_refresh_token,
                    user.id,
                    now + timedelta(days=ApplicationConfig.REFRESH_TOKEN_TTL_DAYS),
                    device_info=DeviceInfo.from_refresh_token(stored),
                )
                rotated = await self.uow.sessions.revoke(
                    refresh_token, replaced_by_token=next_refresh_token
                )
                if not rotated:
                    # A concurrent refresh rotated this token first
                    await self.uow.rollback()
                    logger.warning(
                        "Refresh rejected: concurrent rotation of token %s", stored.id
                    )
                    return Return.err(REVOKED_ERROR)

                logger.info("Rotated refresh token %s for user %s", stored.id, user.id)

            await self.uow.commit()

            return Return.ok(
                RefreshTokenResponse(
                    access_token=access_token,
                    refresh_token=next_refresh_token,
                )
            )
