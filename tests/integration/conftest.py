from typing import List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from taskhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskhub.app.services.notifier import NotificationError, Notifier
from taskhub.depends import get_notifier, get_unit_of_work
from taskhub.domain.entities import NotificationKind, RefreshToken, User  # noqa: F401


class RecordingNotifier(Notifier):
    """Keeps every sent code in memory so tests can read them back"""

    def __init__(self):
        self.sent: List[Tuple[str, NotificationKind, str]] = []
        self.fail = False

    async def send(
        self,
        recipient: str,
        kind: NotificationKind,
        code: str,
        name: Optional[str] = None,
    ) -> None:
        if self.fail:
            raise NotificationError("SMTP unavailable")
        self.sent.append((recipient, kind, code))

    def last_code(self, recipient: str, kind: NotificationKind) -> str:
        for sent_to, sent_kind, code in reversed(self.sent):
            if sent_to == recipient and sent_kind == kind:
                return code
        raise AssertionError(f"No {kind.value} code sent to {recipient}")


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from httpx import ASGITransport
    from taskhub.api.app import create_app
    from taskhub.config import ApplicationConfig

    app = create_app(ApplicationConfig, enable_sweeper=False)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def verified_user(client: AsyncClient, notifier: RecordingNotifier, test_data):
    """Registers and verifies the default test user, returns its payload"""
    payload = test_data.get_copy("user")
    response = await client.post("/auth/register", json=payload)
    assert response.status_code == 201

    code = notifier.last_code(payload["email"], NotificationKind.verification)
    response = await client.post("/auth/verify-email", json={"code": code})
    assert response.status_code == 200
    return payload


@pytest_asyncio.fixture
async def logged_in(client: AsyncClient, verified_user):
    """Login response body for the default test user"""
    response = await client.post(
        "/auth/login",
        json={"email": verified_user["email"], "password": verified_user["password"]},
    )
    assert response.status_code == 200
    return response.json()
