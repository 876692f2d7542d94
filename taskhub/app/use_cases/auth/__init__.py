"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .validate_access_token_use_case import ValidateAccessTokenUseCase
from .dtos import (
    RegisterCommand,
    ClientContext,
    UserInfo,
    RegisterResponse,
    LoginResponse,
    RefreshTokenResponse,
    TokenPayload,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "VerifyEmailUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "ResendVerificationUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    "ValidateAccessTokenUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ClientContext",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "RefreshTokenResponse",
    "TokenPayload",
    # DTOs - Nested Models
    "UserInfo",
]
