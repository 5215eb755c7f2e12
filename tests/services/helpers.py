"""Shared payload builders and onboarding steps for service tests."""

from datetime import date, timedelta

OWNER_ID = "user-owner"
STRANGER_ID = "user-stranger"


def future_date(days: int = 200) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def wedding_payload(**overrides) -> dict:
    payload = {
        "groom_first_name": "John",
        "groom_last_name": "Smith",
        "bride_first_name": "Jane",
        "bride_last_name": "Doe",
        "has_wedding_details": True,
        "wedding_date": future_date(),
        "wedding_location": "Rose Garden",
    }
    payload.update(overrides)
    return payload


async def register_user(client, user_id: str, email: str) -> dict:
    res = await client.post(
        "/api/v1/users", json={"email": email}, headers={"X-User-Id": user_id},
    )
    assert res.status_code == 201, res.text
    return res.json()


async def onboard(client, user_id: str, email: str, **wedding_fields) -> dict:
    """Register the user and create their wedding; returns the wedding."""
    await register_user(client, user_id, email)
    res = await client.post(
        "/api/v1/weddings", json=wedding_payload(**wedding_fields),
        headers={"X-User-Id": user_id},
    )
    assert res.status_code == 201, res.text
    return res.json()


async def list_events(client, headers: dict) -> list[dict]:
    res = await client.get("/api/v1/events", headers=headers)
    assert res.status_code == 200, res.text
    return res.json()


def wedding_day(events: list[dict]) -> dict:
    return next(event for event in events if event["name"] == "Wedding Day")
