"""Event Routes — verifies event CRUD, provisioning and RSVP tallies.

Invariants:
    - A new event invites every existing guest as "Not Invited" and adds a gift
      row for every existing household
    - Deleting an event removes its invitations, gifts, questions and answers
    - Events of another wedding answer 403
"""

from uuid import uuid4

from tests.services.helpers import future_date, list_events, wedding_day


async def test_create_event(client, owner, make_event):
    event = await make_event(
        "Rehearsal Dinner", date=future_date(199), venue="Trattoria",
        start_time="18:00", attire="Smart casual",
    )
    assert event["name"] == "Rehearsal Dinner"
    assert event["wedding_id"] == owner["id"]
    assert event["collect_rsvp"] is False
    assert event["start_time"] == "18:00"


async def test_create_event_blank_name_returns_400(client, owner, owner_headers):
    res = await client.post(
        "/api/v1/events", json={"name": "   "}, headers=owner_headers,
    )
    assert res.status_code == 400


async def test_new_event_invites_existing_guests(
    client, owner, owner_headers, make_household, make_event,
):
    await make_household([
        {"first_name": "Ann", "last_name": "Lee"},
        {"first_name": "Bo", "last_name": "Lee"},
    ])
    event = await make_event("Brunch")

    res = await client.get(
        "/api/v1/invitations", params={"event_id": event["id"]}, headers=owner_headers,
    )
    invitations = res.json()
    assert len(invitations) == 2
    assert {invitation["rsvp"] for invitation in invitations} == {"Not Invited"}


async def test_new_event_adds_gift_per_household(
    client, owner, owner_headers, make_household, make_event,
):
    await make_household()
    await make_household([{"first_name": "Cy", "last_name": "Ray"}])
    event = await make_event("Brunch")

    res = await client.get(
        "/api/v1/gifts", params={"event_id": event["id"]}, headers=owner_headers,
    )
    gifts = res.json()
    assert len(gifts) == 2
    assert all(gift["event_name"] == "Brunch" for gift in gifts)
    assert all(gift["thankyou"] is False for gift in gifts)


async def test_list_events_in_creation_order_with_stats(
    client, owner, owner_headers, make_event, make_household,
):
    await make_event("Brunch")
    events = await list_events(client, owner_headers)
    await make_household([{
        "first_name": "Ann", "last_name": "Lee",
        "invites": {wedding_day(events)["id"]: "Attending"},
    }])

    events = await list_events(client, owner_headers)
    assert [event["name"] for event in events] == ["Wedding Day", "Brunch"]
    assert events[0]["guest_responses"] == {
        "attending": 1, "invited": 0, "declined": 0, "not_invited": 0,
    }
    assert events[1]["guest_responses"]["not_invited"] == 1


async def test_get_event(client, owner, owner_headers, make_event):
    event = await make_event("Brunch")
    res = await client.get(f"/api/v1/events/{event['id']}", headers=owner_headers)
    assert res.status_code == 200
    assert res.json()["name"] == "Brunch"


async def test_get_unknown_event_returns_404(client, owner, owner_headers):
    res = await client.get(f"/api/v1/events/{uuid4()}", headers=owner_headers)
    assert res.status_code == 404


async def test_get_other_weddings_event_returns_403(
    client, owner, stranger, stranger_headers, make_event,
):
    event = await make_event("Brunch")
    res = await client.get(f"/api/v1/events/{event['id']}", headers=stranger_headers)
    assert res.status_code == 403


async def test_update_event_replaces_fields(client, owner, owner_headers, make_event):
    event = await make_event("Brunch", venue="Cafe", attire="Casual")
    res = await client.put(
        f"/api/v1/events/{event['id']}",
        json={"name": "Farewell Brunch", "venue": "Hotel"},
        headers=owner_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Farewell Brunch"
    assert body["venue"] == "Hotel"
    assert body["attire"] is None


async def test_toggle_collect_rsvp(client, owner, owner_headers, make_event):
    event = await make_event("Brunch")
    res = await client.patch(
        f"/api/v1/events/{event['id']}/collect-rsvp",
        json={"collect_rsvp": True}, headers=owner_headers,
    )
    assert res.status_code == 200
    assert res.json()["collect_rsvp"] is True


async def test_rsvp_stats(client, owner, owner_headers, make_household):
    event = wedding_day(await list_events(client, owner_headers))
    await make_household([
        {"first_name": "Ann", "last_name": "Lee", "invites": {event["id"]: "Invited"}},
        {"first_name": "Bo", "last_name": "Lee", "invites": {event["id"]: "Declined"}},
        {"first_name": "Cy", "last_name": "Lee"},
    ])
    res = await client.get(
        f"/api/v1/events/{event['id']}/rsvp-stats", headers=owner_headers,
    )
    assert res.json() == {"attending": 0, "invited": 1, "declined": 1, "not_invited": 1}


async def test_delete_event_removes_invitations_and_gifts(
    client, owner, owner_headers, make_household, make_event,
):
    household = await make_household()
    event = await make_event("Brunch")

    res = await client.delete(f"/api/v1/events/{event['id']}", headers=owner_headers)
    assert res.status_code == 200
    assert res.json() == {"id": event["id"]}

    res = await client.get(
        f"/api/v1/households/{household['id']}", headers=owner_headers,
    )
    body = res.json()
    assert {gift["event_name"] for gift in body["gifts"]} == {"Wedding Day"}
    invitations = body["guests"][0]["invitations"]
    assert [invitation["event_id"] for invitation in invitations] != []
    assert event["id"] not in {invitation["event_id"] for invitation in invitations}


async def test_delete_other_weddings_event_returns_403(
    client, owner, stranger, stranger_headers, make_event,
):
    event = await make_event("Brunch")
    res = await client.delete(f"/api/v1/events/{event['id']}", headers=stranger_headers)
    assert res.status_code == 403


async def test_delete_event_removes_questions_and_answers(
    client, owner, owner_headers, make_household, make_event, test_db,
):
    from sqlalchemy import func, select
    from weddingsite.models.answer import Answer, OptionResponse
    from weddingsite.models.question import Option, Question

    event = await make_event("Brunch")
    household = await make_household([{
        "first_name": "Ann", "last_name": "Lee", "invites": {event["id"]: "Invited"},
    }])
    guest_id = household["guests"][0]["id"]
    meal = (await client.put("/api/v1/questions", json={
        "event_id": event["id"], "text": "Meal?", "type": "Option",
        "options": [{"text": "Fish"}, {"text": "Beef"}],
    }, headers=owner_headers)).json()
    note = (await client.put("/api/v1/questions", json={
        "event_id": event["id"], "text": "Anything else?", "type": "Text",
    }, headers=owner_headers)).json()
    res = await client.post("/api/v1/public/rsvp", json={"answers_to_questions": [
        {
            "question_id": meal["id"], "question_type": "Option",
            "response": meal["options"][0]["id"], "guest_id": guest_id,
        },
        {
            "question_id": note["id"], "question_type": "Text",
            "response": "See you there", "guest_id": guest_id,
            "household_id": household["id"],
        },
    ]})
    assert res.status_code == 200

    async def count(model) -> int:
        return (await test_db.execute(select(func.count()).select_from(model))).scalar_one()

    assert await count(OptionResponse) == 1
    assert await count(Answer) == 1

    res = await client.delete(f"/api/v1/events/{event['id']}", headers=owner_headers)
    assert res.status_code == 200

    for model in (Question, Option, OptionResponse, Answer):
        assert await count(model) == 0, model.__name__
