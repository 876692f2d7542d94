from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from taskhub.api.error import raise_for_error
from taskhub.app.services.notifier import Notifier
from taskhub.app.services.unit_of_work import UnitOfWork
from taskhub.app.use_cases.auth import (
    ClientContext,
    LoginResponse,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    ResendVerificationUseCase,
    ResetPasswordUseCase,
    TokenPayload,
    UserInfo,
    VerifyEmailUseCase,
)
from taskhub.app.use_cases.users import GetUserUseCase
from taskhub.depends import get_current_user, get_notifier, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class MessageResponse(BaseModel):
    """Plain acknowledgement"""

    status: str = "success"
    message: str


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Password length is checked by the use case.

    EmailStr normalizes the address (the domain is lowercased, the local
    part is kept as sent). Login, forgot-password and resend-verification
    parse email the same way, so every lookup uses the normalized form and
    the store still matches it exactly.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class RegisterHttpResponse(BaseModel):
    """Registration result. The verification code only travels by email."""

    status: str = "success"
    message: str
    user: UserInfo


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterHttpResponse,
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    User Registration

    Creates an unverified account and emails a 6-digit verification code.

    Raises:
        - 400 Bad Request: Password too short
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Verification email could not be sent
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )
    result = await RegisterUseCase(uow, notifier).execute(command)
    raise_for_error(result)

    return RegisterHttpResponse(
        message="User registered successfully. Please verify your email.",
        user=result.value.user,
    )


class VerifyEmailRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Email verification code")


@router.post("/verify-email", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def verify_email(
    request: VerifyEmailRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Email Verification

    Raises:
        - 400 Bad Request: Invalid or expired code
    """
    result = await VerifyEmailUseCase(uow).execute(request.code)
    raise_for_error(result)
    return MessageResponse(message="Email verified successfully. You can now log in.")


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Authenticates the user and opens a session tagged with the
    caller's device (User-Agent) and IP.

    Raises:
        - 401 Unauthorized: Invalid credentials or email not verified
    """
    client = ClientContext(
        user_agent=http_request.headers.get("user-agent"),
        ip_address=http_request.client.host if http_request.client else None,
    )
    result = await LoginUseCase(uow).execute(request.email, request.password, client)
    raise_for_error(result)
    return result.value


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Refresh Access Token

    Rotates the refresh token when it is close to expiry.

    Raises:
        - 401 Unauthorized: Unknown, revoked or expired refresh token
    """
    result = await RefreshTokenUseCase(uow).execute(request.refresh_token)
    raise_for_error(result)
    return result.value


class LogoutRequest(BaseModel):
    refresh_token: Optional[str] = Field(default=None, description="Refresh token to revoke")


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(request: LogoutRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Logout. Idempotent."""
    result = await LogoutUseCase(uow).execute(request.refresh_token)
    raise_for_error(result)
    return MessageResponse(message="Logged out successfully")


class EmailRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Request Password Reset

    Same response whether or not the email is registered.
    """
    result = await RequestPasswordResetUseCase(uow, notifier).execute(request.email)
    raise_for_error(result)
    return MessageResponse(
        message="If your email is registered, you will receive a password reset code"
    )


class ResetPasswordRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Password reset code")
    password: str = Field(..., description="New password")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Confirm Password Reset

    Signs the user out of every session.

    Raises:
        - 400 Bad Request: Invalid or expired code, or password too short
    """
    result = await ResetPasswordUseCase(uow).execute(request.code, request.password)
    raise_for_error(result)
    return MessageResponse(
        message="Password reset successfully. Please log in with your new password."
    )


@router.post(
    "/resend-verification", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def resend_verification(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Resend Verification Email

    Raises:
        - 400 Bad Request: Email already verified
        - 404 Not Found: Unknown email
    """
    result = await ResendVerificationUseCase(uow, notifier).execute(request.email)
    raise_for_error(result)
    return MessageResponse(message="Verification email sent successfully")


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def me(
    current_user: TokenPayload = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Profile of the authenticated user"""
    result = await GetUserUseCase(uow).execute(current_user.user_id)
    raise_for_error(result)
    return result.value
