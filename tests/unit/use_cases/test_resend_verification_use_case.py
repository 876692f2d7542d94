"""
Unit tests for ResendVerificationUseCase
"""
from datetime import timedelta

import pytest

from taskhub.app.use_cases.auth import ResendVerificationUseCase
from taskhub.domain.base import utc_now
from taskhub.domain.entities import NotificationKind
from taskhub.domain.errors import NotFoundError, ValidationError
from tests.utils.factories import make_user


@pytest.mark.asyncio
async def test_resend_generates_new_code(mock_uow, mock_notifier):
    """Unverified user gets a fresh code with a fresh 24h window"""
    # Arrange
    mock_uow.users.get_by_email.return_value = make_user(
        user_id=2, is_verified=False, verification_code="111111"
    )

    # Act
    result = await ResendVerificationUseCase(mock_uow, mock_notifier).execute(
        "alice@example.com"
    )

    # Assert
    assert result.is_ok()
    user_id, fields = mock_uow.users.update.call_args[0]
    assert user_id == 2
    assert len(fields["verification_code"]) == 6
    assert fields["verification_expires_at"] - utc_now() > timedelta(hours=23)
    mock_uow.commit.assert_called_once()
    args, _ = mock_notifier.send.call_args
    assert args == (
        "alice@example.com",
        NotificationKind.verification,
        fields["verification_code"],
    )


@pytest.mark.asyncio
async def test_unknown_email(mock_uow, mock_notifier):
    mock_uow.users.get_by_email.return_value = None

    result = await ResendVerificationUseCase(mock_uow, mock_notifier).execute("x@x.com")

    assert result.is_err()
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == "USER_NOT_FOUND"
    mock_notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_already_verified(mock_uow, mock_notifier):
    mock_uow.users.get_by_email.return_value = make_user(is_verified=True)

    result = await ResendVerificationUseCase(mock_uow, mock_notifier).execute(
        "alice@example.com"
    )

    assert result.is_err()
    assert isinstance(result.error, ValidationError)
    assert result.error.code == "ALREADY_VERIFIED"
    mock_uow.users.update.assert_not_called()
    mock_notifier.send.assert_not_called()
