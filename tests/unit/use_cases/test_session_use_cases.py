"""
Unit tests for session listing, revocation and purge
"""
from datetime import timedelta

import pytest

from taskhub.app.use_cases.sessions import (
    ListActiveSessionsUseCase,
    PurgeExpiredSessionsUseCase,
    RevokeAllOtherSessionsUseCase,
    RevokeSessionUseCase,
)
from taskhub.domain.errors import NotFoundError
from tests.utils.factories import make_refresh_token


@pytest.mark.asyncio
async def test_list_sessions_fills_defaults(mock_uow):
    """Missing device metadata is reported with placeholder values"""
    # Arrange
    bare = make_refresh_token(token="x" * 80, session_id=1)
    tagged = make_refresh_token(
        token="y" * 80,
        session_id=2,
        device_name="desktop - Firefox",
        device_type="desktop",
        browser="Firefox",
        ip_address="192.0.2.1",
    )
    mock_uow.sessions.list_active_for_user.return_value = [tagged, bare]

    # Act
    result = await ListActiveSessionsUseCase(mock_uow).execute(1)

    # Assert
    assert result.is_ok()
    first, second = result.value
    assert first.id == 2
    assert first.browser == "Firefox"
    assert second.device_name == "Unknown device"
    assert second.device_type == "unknown"
    assert second.browser == "unknown"
    assert second.ip_address == "unknown"
    assert "token" not in second.model_dump()
    mock_uow.sessions.list_active_for_user.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_revoke_own_session(mock_uow):
    session = make_refresh_token(token="s" * 80, user_id=1, session_id=33)
    mock_uow.sessions.get_by_id.return_value = session

    result = await RevokeSessionUseCase(mock_uow).execute(33, 1)

    assert result.is_ok()
    mock_uow.sessions.revoke.assert_called_once_with("s" * 80)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "session",
    [
        None,
        make_refresh_token(user_id=2, session_id=33),
        make_refresh_token(user_id=1, session_id=33, revoked=True),
        make_refresh_token(user_id=1, session_id=33, expires_in=timedelta(seconds=-1)),
    ],
    ids=["missing", "other-user", "revoked", "expired"],
)
async def test_revoke_session_not_found(mock_uow, session):
    """Foreign sessions look exactly like missing ones"""
    mock_uow.sessions.get_by_id.return_value = session

    result = await RevokeSessionUseCase(mock_uow).execute(33, 1)

    assert result.is_err()
    assert result.error == NotFoundError("SESSION_NOT_FOUND", "Session not found")
    mock_uow.sessions.revoke.assert_not_called()


@pytest.mark.asyncio
async def test_revoke_all_other_sessions(mock_uow):
    current = make_refresh_token(token="k" * 80, user_id=1)
    mock_uow.sessions.get_by_token.return_value = current
    mock_uow.sessions.revoke_all_except.return_value = 2

    result = await RevokeAllOtherSessionsUseCase(mock_uow).execute(1, "k" * 80)

    assert result.is_ok()
    assert result.value.revoked_count == 2
    mock_uow.sessions.revoke_all_except.assert_called_once_with(1, "k" * 80)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_revoke_all_other_sessions_requires_own_current_token(mock_uow):
    mock_uow.sessions.get_by_token.return_value = make_refresh_token(user_id=2)

    result = await RevokeAllOtherSessionsUseCase(mock_uow).execute(1, "a" * 80)

    assert result.is_err()
    assert isinstance(result.error, NotFoundError)
    mock_uow.sessions.revoke_all_except.assert_not_called()


@pytest.mark.asyncio
async def test_purge_expired_sessions(mock_uow):
    mock_uow.sessions.purge_expired_revoked.return_value = 4

    result = await PurgeExpiredSessionsUseCase(mock_uow).execute()

    assert result.value.purged_count == 4
    mock_uow.commit.assert_called_once()
