"""User Routes — verifies profile registration and self-service access.

Invariants:
    - Registration needs the X-User-Id identity (401 without it)
    - One profile per identity and per email (409 on either collision)
    - Users only read and edit their own profile (403 otherwise)
"""

from tests.services.helpers import OWNER_ID, register_user


async def test_register_creates_profile(client, owner_headers):
    res = await client.post(
        "/api/v1/users", json={"email": "owner@example.com", "name": "Owner"},
        headers=owner_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == OWNER_ID
    assert body["email"] == "owner@example.com"
    assert body["website_url"] is None


async def test_register_without_identity_returns_401(client):
    res = await client.post("/api/v1/users", json={"email": "x@example.com"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


async def test_register_twice_returns_409(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.post(
        "/api/v1/users", json={"email": "other@example.com"}, headers=owner_headers,
    )
    assert res.status_code == 409


async def test_register_taken_email_returns_409(client):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.post(
        "/api/v1/users", json={"email": "owner@example.com"},
        headers={"X-User-Id": "someone-else"},
    )
    assert res.status_code == 409


async def test_register_invalid_email_returns_400(client, owner_headers):
    res = await client.post(
        "/api/v1/users", json={"email": "not-an-email"}, headers=owner_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_me_is_null_when_signed_out(client):
    res = await client.get("/api/v1/users/me")
    assert res.status_code == 200
    assert res.json() is None


async def test_me_is_null_before_registration(client, owner_headers):
    res = await client.get("/api/v1/users/me", headers=owner_headers)
    assert res.json() is None


async def test_me_returns_profile(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.get("/api/v1/users/me", headers=owner_headers)
    assert res.json()["email"] == "owner@example.com"


async def test_update_profile(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.patch(
        "/api/v1/users/me", json={"name": "Jane Doe"}, headers=owner_headers,
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Jane Doe"
    assert res.json()["email"] == "owner@example.com"


async def test_update_profile_to_taken_email_returns_409(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    await register_user(client, "other", "other@example.com")
    res = await client.patch(
        "/api/v1/users/me", json={"email": "other@example.com"}, headers=owner_headers,
    )
    assert res.status_code == 409


async def test_reading_another_profile_returns_403(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    await register_user(client, "other", "other@example.com")
    res = await client.get("/api/v1/users/other", headers=owner_headers)
    assert res.status_code == 403


async def test_reading_own_profile_by_id(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.get(f"/api/v1/users/{OWNER_ID}", headers=owner_headers)
    assert res.status_code == 200
    assert res.json()["id"] == OWNER_ID
