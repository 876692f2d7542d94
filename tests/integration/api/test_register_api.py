import pytest
from httpx import AsyncClient
from sqlmodel import select

from taskhub.domain.entities import NotificationKind, User
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_successful_registration(client: AsyncClient, db_session, notifier, test_data):
    """
    Given a new email address
    When I register
    Then an unverified account is created
    And a 6-digit verification code is emailed but never returned
    """
    payload = test_data.get_copy("user")

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "success"
    assert exclude_keys(data["user"]) == {
        "name": "Alice",
        "email": "alice@example.com",
        "is_verified": False,
    }
    assert "verification_code" not in data
    assert "password_hash" not in data["user"]

    code = notifier.last_code("alice@example.com", NotificationKind.verification)
    assert len(code) == 6 and code.isdigit()

    result = await db_session.exec(select(User).where(User.email == "alice@example.com"))
    user = result.one()
    assert user.verification_code == code
    assert user.password_hash != payload["password"]
    assert user.verification_expires_at > user.created_at


@pytest.mark.asyncio
async def test_duplicate_email_conflict(client: AsyncClient, test_data):
    payload = test_data.get_copy("user")
    await client.post("/auth/register", json=payload)

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_short_password_rejected(client: AsyncClient, db_session, test_data):
    payload = test_data.get_copy("user")
    payload["password"] = "short"

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"
    result = await db_session.exec(select(User))
    assert result.all() == []


@pytest.mark.asyncio
async def test_malformed_email_rejected(client: AsyncClient, test_data):
    payload = test_data.get_copy("user")
    payload["email"] = "not-an-email"

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delivery_failure_keeps_account(client: AsyncClient, db_session, notifier, test_data):
    """The account survives a failed email; resend-verification recovers it"""
    notifier.fail = True

    response = await client.post("/auth/register", json=test_data.get_copy("user"))

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "EMAIL_DELIVERY_FAILED"

    result = await db_session.exec(select(User).where(User.email == "alice@example.com"))
    assert result.one().is_verified is False

    notifier.fail = False
    response = await client.post(
        "/auth/resend-verification", json={"email": "alice@example.com"}
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_over_long_password_rejected(client: AsyncClient, db_session, test_data):
    payload = test_data.get_copy("user")
    payload["password"] = "x" * 100

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"
    result = await db_session.exec(select(User))
    assert result.all() == []


@pytest.mark.asyncio
async def test_email_domain_is_normalized_consistently(
    client: AsyncClient, db_session, notifier, test_data
):
    """The stored email is the normalized form; the local part keeps its case"""
    payload = test_data.get_copy("user")
    payload["email"] = "Alice@EXAMPLE.com"

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 201
    assert response.json()["user"]["email"] == "Alice@example.com"
    result = await db_session.exec(select(User))
    assert [u.email for u in result.all()] == ["Alice@example.com"]

    code = notifier.last_code("Alice@example.com", NotificationKind.verification)
    await client.post("/auth/verify-email", json={"code": code})

    same_domain_any_case = await client.post(
        "/auth/login", json={"email": "Alice@Example.COM", "password": payload["password"]}
    )
    other_local_case = await client.post(
        "/auth/login", json={"email": "alice@example.com", "password": payload["password"]}
    )
    assert same_domain_any_case.status_code == 200
    assert other_local_case.status_code == 401
