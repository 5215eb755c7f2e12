"""Question Routes — verifies RSVP form questions and their options.

Invariants:
    - A question belongs to one event or to the website, within the caller's wedding
    - Option questions keep at least 2 options
    - Deleted options go before submitted options are applied
"""

from uuid import uuid4

from tests.services.helpers import list_events, wedding_day


async def _event_id(client, headers) -> str:
    return wedding_day(await list_events(client, headers))["id"]


async def _save(client, headers, **body):
    return await client.put("/api/v1/questions", json=body, headers=headers)


async def test_create_text_question(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    res = await _save(
        client, owner_headers, event_id=event_id, text="Song request?", type="Text",
    )
    assert res.status_code == 200
    body = res.json()
    assert body["event_id"] == event_id
    assert body["website_id"] is None
    assert body["options"] == []


async def test_create_option_question(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    res = await _save(
        client, owner_headers, event_id=event_id, text="Meal?", type="Option",
        is_required=True, options=[{"text": "Fish"}, {"text": "Beef"}],
    )
    body = res.json()
    assert body["is_required"] is True
    assert sorted(option["text"] for option in body["options"]) == ["Beef", "Fish"]
    assert all(option["response_count"] == 0 for option in body["options"])


async def test_option_question_needs_two_options(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    res = await _save(
        client, owner_headers, event_id=event_id, text="Meal?", type="Option",
        options=[{"text": "Fish"}],
    )
    assert res.status_code == 400


async def test_update_options(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    created = (await _save(
        client, owner_headers, event_id=event_id, text="Meal?", type="Option",
        options=[{"text": "Fish"}, {"text": "Beef"}],
    )).json()
    fish = next(option for option in created["options"] if option["text"] == "Fish")
    beef = next(option for option in created["options"] if option["text"] == "Beef")

    res = await _save(
        client, owner_headers, id=created["id"], event_id=event_id,
        text="Main course?", type="Option",
        options=[{"id": fish["id"], "text": "Salmon"}, {"text": "Risotto"}],
        deleted_options=[beef["id"]],
    )
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == created["id"]
    assert body["text"] == "Main course?"
    assert sorted(option["text"] for option in body["options"]) == ["Risotto", "Salmon"]


async def test_deleting_options_below_two_returns_400(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    created = (await _save(
        client, owner_headers, event_id=event_id, text="Meal?", type="Option",
        options=[{"text": "Fish"}, {"text": "Beef"}],
    )).json()
    fish, beef = created["options"]
    res = await _save(
        client, owner_headers, id=created["id"], event_id=event_id,
        text="Meal?", type="Option",
        options=[{"id": fish["id"], "text": fish["text"]}, {"id": beef["id"], "text": "x"}],
        deleted_options=[beef["id"]],
    )
    assert res.status_code == 400


async def test_switch_to_text_drops_options(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    created = (await _save(
        client, owner_headers, event_id=event_id, text="Meal?", type="Option",
        options=[{"text": "Fish"}, {"text": "Beef"}],
    )).json()
    res = await _save(
        client, owner_headers, id=created["id"], event_id=event_id,
        text="Dietary needs?", type="Text",
    )
    assert res.json()["type"] == "Text"
    assert res.json()["options"] == []


async def test_list_questions_by_event(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    await _save(client, owner_headers, event_id=event_id, text="Song?", type="Text")
    await _save(client, owner_headers, event_id=event_id, text="Allergies?", type="Text")
    res = await client.get(
        "/api/v1/questions", params={"event_id": event_id}, headers=owner_headers,
    )
    assert [question["text"] for question in res.json()] == ["Song?", "Allergies?"]


async def test_list_questions_by_website(client, owner, owner_headers, enable_website):
    website = await enable_website()
    res = await client.get(
        "/api/v1/questions", params={"website_id": website["id"]}, headers=owner_headers,
    )
    assert len(res.json()) == 2


async def test_list_questions_needs_a_filter(client, owner, owner_headers):
    res = await client.get("/api/v1/questions", headers=owner_headers)
    assert res.status_code == 400


async def test_get_question_with_activity(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    created = (await _save(
        client, owner_headers, event_id=event_id, text="Song?", type="Text",
    )).json()
    res = await client.get(f"/api/v1/questions/{created['id']}", headers=owner_headers)
    assert res.status_code == 200
    assert res.json()["answer_count"] == 0
    assert res.json()["recent_answer"] is None


async def test_delete_question(client, owner, owner_headers):
    event_id = await _event_id(client, owner_headers)
    created = (await _save(
        client, owner_headers, event_id=event_id, text="Song?", type="Text",
    )).json()
    res = await client.delete(f"/api/v1/questions/{created['id']}", headers=owner_headers)
    assert res.json() == {"id": created["id"]}
    res = await client.get(f"/api/v1/questions/{created['id']}", headers=owner_headers)
    assert res.status_code == 404


async def test_question_for_unknown_event_returns_404(client, owner, owner_headers):
    res = await _save(
        client, owner_headers, event_id=str(uuid4()), text="Song?", type="Text",
    )
    assert res.status_code == 404


async def test_question_for_other_weddings_event_returns_403(
    client, owner, stranger, owner_headers, stranger_headers,
):
    event_id = await _event_id(client, owner_headers)
    res = await _save(
        client, stranger_headers, event_id=event_id, text="Song?", type="Text",
    )
    assert res.status_code == 403
