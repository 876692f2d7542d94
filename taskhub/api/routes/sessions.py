from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskhub.api.error import raise_for_error
from taskhub.app.services.unit_of_work import UnitOfWork
from taskhub.app.use_cases.auth import TokenPayload
from taskhub.app.use_cases.sessions import (
    ListActiveSessionsUseCase,
    RevokeAllOtherSessionsUseCase,
    RevokeSessionUseCase,
    SessionInfo,
)
from taskhub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class RevokeSessionResponse(BaseModel):
    """Response for session revocation operations"""

    message: str
    revoked_count: int


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionInfo])
async def list_sessions(
    current_user: TokenPayload = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active sessions of the current user, most recently used first"""
    result = await ListActiveSessionsUseCase(uow).execute(current_user.user_id)
    raise_for_error(result)
    return result.value


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionResponse,
)
async def revoke_session(
    session_id: int,
    current_user: TokenPayload = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Specific Session

    Logs out one device.

    Raises:
        - 404 Not Found: Session not found, not active, or not owned by the caller
    """
    result = await RevokeSessionUseCase(uow).execute(session_id, current_user.user_id)
    raise_for_error(result)
    return RevokeSessionResponse(message="Session revoked successfully", revoked_count=1)


class RevokeOthersRequest(BaseModel):
    """Request to revoke all sessions except the current one"""

    refresh_token: str = Field(
        ..., min_length=1, description="Current refresh token, kept active"
    )


@router.post(
    "/revoke-others",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionResponse,
)
async def revoke_all_except_current(
    request: RevokeOthersRequest,
    current_user: TokenPayload = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke All Other Sessions

    Raises:
        - 404 Not Found: Current refresh token is not an active session of the caller
    """
    result = await RevokeAllOtherSessionsUseCase(uow).execute(
        current_user.user_id, request.refresh_token
    )
    raise_for_error(result)

    count = result.value.revoked_count
    return RevokeSessionResponse(
        message=f"Successfully revoked {count} other session(s)",
        revoked_count=count,
    )
