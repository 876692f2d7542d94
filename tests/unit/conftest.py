import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork whose repository methods return nothing by default"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    for name in (
        "get_by_email",
        "get_by_id",
        "get_by_verification_code",
        "get_by_reset_code",
        "create",
        "update",
        "mark_verified",
    ):
        setattr(uow.users, name, AsyncMock(return_value=None))

    uow.sessions = MagicMock()
    for name in (
        "create",
        "get_by_token",
        "get_by_id",
        "update_last_used",
        "revoke",
        "revoke_all_for_user",
        "revoke_all_except",
        "list_active_for_user",
        "purge_expired_revoked",
    ):
        setattr(uow.sessions, name, AsyncMock(return_value=None))

    return uow


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.send = AsyncMock()
    return notifier
