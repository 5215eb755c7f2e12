"""Wedding Routes — verifies onboarding and the wedding profile.

Invariants:
    - Creating a wedding links the user, seeds default tags and (with details)
      creates the dated "Wedding Day" event
    - A user owns at most one wedding
    - Tenant routes answer 404 until onboarding completes
"""

from datetime import date, timedelta

from tests.services.helpers import (
    OWNER_ID, future_date, list_events, register_user, wedding_payload, wedding_day,
)


async def test_create_wedding(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.post(
        "/api/v1/weddings", json=wedding_payload(groom_middle_name="Paul"),
        headers=owner_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["groom_first_name"] == "John"
    assert body["groom_middle_name"] == "Paul"
    assert body["enabled_add_ons"] == []


async def test_create_wedding_adds_wedding_day_event(client, owner, owner_headers):
    events = await list_events(client, owner_headers)
    assert len(events) == 1
    event = wedding_day(events)
    assert event["date"] == future_date()
    assert event["venue"] == "Rose Garden"
    assert event["collect_rsvp"] is True


async def test_create_wedding_without_details_has_no_events(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.post(
        "/api/v1/weddings",
        json=wedding_payload(has_wedding_details=False),
        headers=owner_headers,
    )
    assert res.status_code == 201
    assert await list_events(client, owner_headers) == []


async def test_create_wedding_seeds_default_tags(client, owner, owner_headers):
    res = await client.get("/api/v1/guest-tags", headers=owner_headers)
    names = {tag["name"] for tag in res.json()}
    assert names == {"Family", "MutualFriends", "Coworkers", "Plus One"}


async def test_create_wedding_copies_names_to_profile(client, owner, owner_headers):
    res = await client.get("/api/v1/users/me", headers=owner_headers)
    profile = res.json()
    assert profile["groom_first_name"] == "John"
    assert profile["bride_last_name"] == "Doe"


async def test_second_wedding_returns_400(client, owner, owner_headers):
    res = await client.post(
        "/api/v1/weddings", json=wedding_payload(), headers=owner_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "WEDDING_EXISTS"


async def test_wedding_without_profile_returns_404(client, owner_headers):
    res = await client.post(
        "/api/v1/weddings", json=wedding_payload(), headers=owner_headers,
    )
    assert res.status_code == 404


async def test_past_wedding_date_returns_400(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    res = await client.post(
        "/api/v1/weddings", json=wedding_payload(wedding_date=yesterday),
        headers=owner_headers,
    )
    assert res.status_code == 400


async def test_has_wedding(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.get("/api/v1/weddings/me/exists", headers=owner_headers)
    assert res.json() == {"has_wedding": False}
    await client.post("/api/v1/weddings", json=wedding_payload(), headers=owner_headers)
    res = await client.get("/api/v1/weddings/me/exists", headers=owner_headers)
    assert res.json() == {"has_wedding": True}


async def test_get_my_wedding(client, owner, owner_headers):
    res = await client.get("/api/v1/weddings/me", headers=owner_headers)
    assert res.json()["id"] == owner["id"]


async def test_get_my_wedding_signed_out_is_null(client, owner):
    res = await client.get("/api/v1/weddings/me")
    assert res.status_code == 200
    assert res.json() is None


async def test_update_wedding(client, owner, owner_headers):
    res = await client.patch(
        "/api/v1/weddings/me",
        json={"bride_first_name": "Janet", "enabled_add_ons": ["registry"]},
        headers=owner_headers,
    )
    assert res.status_code == 200
    assert res.json()["bride_first_name"] == "Janet"
    assert res.json()["enabled_add_ons"] == ["registry"]
    assert res.json()["groom_first_name"] == "John"


async def test_tenant_route_before_onboarding_returns_404(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.get("/api/v1/events", headers=owner_headers)
    assert res.status_code == 404
    assert "onboarding" in res.json()["error"]["message"]


async def test_tenant_route_without_identity_returns_401(client):
    res = await client.get("/api/v1/households")
    assert res.status_code == 401
