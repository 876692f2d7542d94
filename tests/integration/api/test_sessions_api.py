import pytest
from httpx import AsyncClient

from taskhub.domain.entities import NotificationKind


def _auth(login_body) -> dict:
    return {"Authorization": f"Bearer {login_body['access_token']}"}


async def _login(client: AsyncClient, user: dict, user_agent: str) -> dict:
    response = await client.post(
        "/auth/login",
        json={"email": user["email"], "password": user["password"]},
        headers={"User-Agent": user_agent},
    )
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_list_sessions(client: AsyncClient, verified_user, test_data):
    """Sessions show device metadata and never the token itself"""
    desktop = await _login(client, verified_user, test_data.user_agent("desktop_firefox"))
    phone = await _login(client, verified_user, test_data.user_agent("mobile_safari"))

    response = await client.get("/sessions", headers=_auth(desktop))

    assert response.status_code == 200
    sessions = response.json()
    assert len(sessions) == 2
    assert {s["device_name"] for s in sessions} == {"desktop - Firefox", "mobile - Safari"}
    for s in sessions:
        assert "token" not in s
        assert desktop["refresh_token"] not in s.values()
        assert phone["refresh_token"] not in s.values()


@pytest.mark.asyncio
async def test_revoke_single_session(client: AsyncClient, verified_user, test_data):
    desktop = await _login(client, verified_user, test_data.user_agent("desktop_firefox"))
    phone = await _login(client, verified_user, test_data.user_agent("mobile_safari"))
    sessions = (await client.get("/sessions", headers=_auth(desktop))).json()
    phone_session = next(s for s in sessions if s["device_type"] == "mobile")

    response = await client.delete(f"/sessions/{phone_session['id']}", headers=_auth(desktop))

    assert response.status_code == 200
    assert response.json()["revoked_count"] == 1
    refresh = await client.post("/auth/refresh", json={"refresh_token": phone["refresh_token"]})
    assert refresh.status_code == 401

    again = await client.delete(f"/sessions/{phone_session['id']}", headers=_auth(desktop))
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_cannot_revoke_another_users_session(
    client: AsyncClient, notifier, verified_user, test_data
):

    other = test_data.get_copy("other_user")
    await client.post("/auth/register", json=other)
    code = notifier.last_code(other["email"], NotificationKind.verification)
    await client.post("/auth/verify-email", json={"code": code})

    alice = await _login(client, verified_user, "test")
    bob = await _login(client, other, "test")
    bob_session = (await client.get("/sessions", headers=_auth(bob))).json()[0]

    response = await client.delete(f"/sessions/{bob_session['id']}", headers=_auth(alice))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"
    refresh = await client.post("/auth/refresh", json={"refresh_token": bob["refresh_token"]})
    assert refresh.status_code == 200


@pytest.mark.asyncio
async def test_revoke_other_sessions(client: AsyncClient, verified_user, test_data):
    current = await _login(client, verified_user, test_data.user_agent("desktop_firefox"))
    others = [
        await _login(client, verified_user, test_data.user_agent("mobile_safari"))
        for _ in range(2)
    ]

    response = await client.post(
        "/sessions/revoke-others",
        json={"refresh_token": current["refresh_token"]},
        headers=_auth(current),
    )

    assert response.status_code == 200
    assert response.json()["revoked_count"] == 2

    kept = await client.post("/auth/refresh", json={"refresh_token": current["refresh_token"]})
    assert kept.status_code == 200
    for other in others:
        refresh = await client.post(
            "/auth/refresh", json={"refresh_token": other["refresh_token"]}
        )
        assert refresh.status_code == 401

    sessions = (await client.get("/sessions", headers=_auth(current))).json()
    assert len(sessions) == 1


@pytest.mark.asyncio
async def test_revoke_others_requires_current_session(client: AsyncClient, logged_in):
    response = await client.post(
        "/sessions/revoke-others",
        json={"refresh_token": "f" * 80},
        headers=_auth(logged_in),
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_sessions_require_authentication(client: AsyncClient):
    response = await client.get("/sessions")

    assert response.status_code in (401, 403)
