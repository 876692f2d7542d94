"""
Validate Access Token Use Case

Checks signature and expiry of a bearer access token.
"""

from pydantic import ValidationError as PayloadValidationError

from taskhub.domain.errors import AuthenticationError
from taskhub.libs.result import Result, Return
from taskhub.api.utils.jwt import verify_jwt
from .dtos import TokenPayload

INVALID_TOKEN = AuthenticationError("INVALID_TOKEN", "Invalid or expired token")


class ValidateAccessTokenUseCase:
    """
    Stateless: no store access. Every failure (malformed, wrong
    signature, expired, missing claims) collapses to one error.
    """

    def execute(self, token: str) -> Result[TokenPayload]:
        claims = verify_jwt(token)
        if claims is None:
            return Return.err(INVALID_TOKEN)

        try:
            payload = TokenPayload(user_id=claims.get("user_id"), email=claims.get("email"))
        except PayloadValidationError:
            return Return.err(INVALID_TOKEN)

        return Return.ok(payload)
