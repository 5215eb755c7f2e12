"""RSVP Submission — verifies what a guest party submits from the public site.

Invariants:
    - RSVPs update existing invitations; unknown ones fail the whole submission
    - Text answers are upserted per (question, guest, household)
    - Option answers keep one choice per respondent and move counts on change
    - Closed RSVPs answer 412
"""

from uuid import uuid4

from tests.services.helpers import list_events, wedding_day


async def _party(client, owner_headers, make_household) -> tuple[dict, dict]:
    event = wedding_day(await list_events(client, owner_headers))
    household = await make_household([{
        "first_name": "Ann", "last_name": "Lee", "invites": {event["id"]: "Invited"},
    }])
    return event, household


async def _option_question(client, headers, event_id) -> dict:
    res = await client.put("/api/v1/questions", json={
        "event_id": event_id, "text": "Meal?", "type": "Option",
        "options": [{"text": "Fish"}, {"text": "Beef"}],
    }, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()


def _options(question: dict) -> dict:
    return {option["text"]: option for option in question["options"]}


async def _question(client, headers, question_id) -> dict:
    res = await client.get(f"/api/v1/questions/{question_id}", headers=headers)
    return res.json()


async def _submit(client, **body):
    return await client.post("/api/v1/public/rsvp", json=body)


async def test_rsvp_updates_invitation(client, owner, owner_headers, make_household):
    event, household = await _party(client, owner_headers, make_household)
    guest = household["guests"][0]

    res = await _submit(client, rsvp_responses=[{
        "guest_id": guest["id"], "event_id": event["id"], "rsvp": "Attending",
    }])
    assert res.status_code == 200
    assert res.json() == {"success": True}

    stats = await client.get(
        f"/api/v1/events/{event['id']}/rsvp-stats", headers=owner_headers,
    )
    assert stats.json()["attending"] == 1


async def test_unknown_invitation_returns_404(client, owner):
    res = await _submit(client, rsvp_responses=[{
        "guest_id": 424242, "event_id": str(uuid4()), "rsvp": "Attending",
    }])
    assert res.status_code == 404


async def test_failed_submission_changes_nothing(client, owner, owner_headers, make_household):
    event, household = await _party(client, owner_headers, make_household)
    guest = household["guests"][0]
    res = await _submit(client, rsvp_responses=[
        {"guest_id": guest["id"], "event_id": event["id"], "rsvp": "Declined"},
        {"guest_id": 424242, "event_id": event["id"], "rsvp": "Attending"},
    ])
    assert res.status_code == 404

    res = await client.get(f"/api/v1/guests/{guest['id']}", headers=owner_headers)
    assert res.json()["invitations"][0]["rsvp"] == "Invited"


async def test_text_answer_is_upserted(
    client, owner, owner_headers, make_household, enable_website,
):
    website = await enable_website()
    question = website["general_questions"][0]
    _, household = await _party(client, owner_headers, make_household)
    guest = household["guests"][0]
    answer = {
        "question_id": question["id"], "question_type": "Text",
        "guest_id": guest["id"], "household_id": household["id"],
        "guest_first_name": "Ann", "guest_last_name": "Lee",
    }

    await _submit(client, answers_to_questions=[{**answer, "response": "No kids"}])
    await _submit(client, answers_to_questions=[{**answer, "response": "One toddler"}])

    detail = await _question(client, owner_headers, question["id"])
    assert detail["answer_count"] == 1
    assert detail["recent_answer"]["response"] == "One toddler"
    assert detail["recent_answer"]["guest_first_name"] == "Ann"


async def test_anonymous_text_answer(client, owner, owner_headers, enable_website):
    website = await enable_website()
    question = website["general_questions"][1]
    res = await _submit(client, answers_to_questions=[{
        "question_id": question["id"], "question_type": "Text",
        "response": "Congratulations!",
    }])
    assert res.status_code == 200
    detail = await _question(client, owner_headers, question["id"])
    assert detail["answer_count"] == 1


async def test_option_answer_counts(client, owner, owner_headers, make_household):
    event, household = await _party(client, owner_headers, make_household)
    question = await _option_question(client, owner_headers, event["id"])
    fish = _options(question)["Fish"]

    await _submit(client, answers_to_questions=[{
        "question_id": question["id"], "question_type": "Option",
        "response": fish["id"], "guest_id": household["guests"][0]["id"],
    }])

    counts = {
        text: option["response_count"]
        for text, option in _options(await _question(client, owner_headers, question["id"])).items()
    }
    assert counts == {"Fish": 1, "Beef": 0}


async def test_changing_option_moves_count(client, owner, owner_headers, make_household):
    event, household = await _party(client, owner_headers, make_household)
    question = await _option_question(client, owner_headers, event["id"])
    options = _options(question)
    answer = {
        "question_id": question["id"], "question_type": "Option",
        "guest_id": household["guests"][0]["id"],
    }

    await _submit(client, answers_to_questions=[{**answer, "response": options["Fish"]["id"]}])
    await _submit(client, answers_to_questions=[{**answer, "response": options["Beef"]["id"]}])
    await _submit(client, answers_to_questions=[{**answer, "response": options["Beef"]["id"]}])

    detail = await _question(client, owner_headers, question["id"])
    counts = {text: option["response_count"] for text, option in _options(detail).items()}
    assert counts == {"Fish": 0, "Beef": 1}
    assert detail["answer_count"] == 1


async def test_option_from_other_question_returns_400(
    client, owner, owner_headers, make_household,
):
    event, household = await _party(client, owner_headers, make_household)
    first = await _option_question(client, owner_headers, event["id"])
    second = await _option_question(client, owner_headers, event["id"])
    res = await _submit(client, answers_to_questions=[{
        "question_id": first["id"], "question_type": "Option",
        "response": _options(second)["Fish"]["id"],
    }])
    assert res.status_code == 400


async def test_non_uuid_option_returns_400(client, owner, owner_headers, make_household):
    event, _ = await _party(client, owner_headers, make_household)
    question = await _option_question(client, owner_headers, event["id"])
    res = await _submit(client, answers_to_questions=[{
        "question_id": question["id"], "question_type": "Option", "response": "Fish",
    }])
    assert res.status_code == 400


async def test_mismatched_question_type_returns_400(
    client, owner, owner_headers, enable_website,
):
    website = await enable_website()
    res = await _submit(client, answers_to_questions=[{
        "question_id": website["general_questions"][0]["id"],
        "question_type": "Option", "response": str(uuid4()),
    }])
    assert res.status_code == 400


async def test_closed_rsvp_returns_412(
    client, owner, owner_headers, make_household, enable_website,
):
    website = await enable_website()
    event, household = await _party(client, owner_headers, make_household)
    await client.patch(
        f"/api/v1/websites/{website['id']}/rsvp-enabled",
        json={"is_rsvp_enabled": False}, headers=owner_headers,
    )
    res = await _submit(client, rsvp_responses=[{
        "guest_id": household["guests"][0]["id"], "event_id": event["id"],
        "rsvp": "Attending",
    }])
    assert res.status_code == 412
