"""Dashboard Route — verifies the couple's overview."""

from tests.services.helpers import OWNER_ID, list_events, register_user, wedding_day


async def test_dashboard_null_before_onboarding(client, owner_headers):
    await register_user(client, OWNER_ID, "owner@example.com")
    res = await client.get("/api/v1/dashboard", headers=owner_headers)
    assert res.status_code == 200
    assert res.json() is None


async def test_dashboard_requires_identity(client):
    res = await client.get("/api/v1/dashboard")
    assert res.status_code == 401


async def test_dashboard_overview(
    client, owner, owner_headers, make_household, make_event, enable_website,
):
    await enable_website()
    await make_event("Brunch")
    event = wedding_day(await list_events(client, owner_headers))
    await make_household([
        {"first_name": "Ann", "last_name": "Lee", "invites": {event["id"]: "Attending"}},
        {"first_name": "Bo", "last_name": "Lee"},
    ])
    await make_household([{"first_name": "Cy", "last_name": "Ray"}])

    res = await client.get("/api/v1/dashboard", headers=owner_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["wedding_id"] == owner["id"]
    assert body["total_guests"] == 3
    assert body["total_events"] == 2
    assert len(body["households"]) == 2

    data = body["wedding_data"]
    assert data["groom_first_name"] == "John"
    assert data["days_remaining"] == 200
    assert data["wedding_date"]["standard_format"]
    assert data["website"]["sub_url"] == "johnsmithandjanedoe"
    assert len(data["website"]["general_questions"]) == 2

    by_name = {item["name"]: item for item in body["events"]}
    assert by_name["Wedding Day"]["guest_responses"] == {
        "attending": 1, "invited": 0, "declined": 0, "not_invited": 2,
    }
    assert by_name["Brunch"]["questions"] == []


async def test_dashboard_without_website(client, owner, owner_headers):
    body = (await client.get("/api/v1/dashboard", headers=owner_headers)).json()
    assert body["wedding_data"]["website"] is None
    assert body["total_guests"] == 0
