"""
Use Cases

Organized into domain folders:
- auth/: Registration, verification, login, refresh, logout, password reset
- sessions/: Session listing, revocation, purge
- users/: User profile
"""

from .auth import (
    RegisterUseCase,
    VerifyEmailUseCase,
    LoginUseCase,
    RefreshTokenUseCase,
    LogoutUseCase,
    ResendVerificationUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
    ValidateAccessTokenUseCase,
)
from .sessions import (
    ListActiveSessionsUseCase,
    RevokeSessionUseCase,
    RevokeAllOtherSessionsUseCase,
    PurgeExpiredSessionsUseCase,
)
from .users import GetUserUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "VerifyEmailUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "ResendVerificationUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    "ValidateAccessTokenUseCase",
    # Sessions
    "ListActiveSessionsUseCase",
    "RevokeSessionUseCase",
    "RevokeAllOtherSessionsUseCase",
    "PurgeExpiredSessionsUseCase",
    # Users
    "GetUserUseCase",
]
