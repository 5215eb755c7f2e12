"""Guest Party Rules — verifies primary contact, invitation planning and tag limits.

Tests:
    - First guest becomes primary only when nobody is flagged
    - Every event gets a status; unlisted events are Not Invited
    - Invites for foreign events and too many / unknown tags are rejected
"""

from uuid import uuid4

import pytest

from weddingsite.core.errors import InputValidationError
from weddingsite.core.guest_party import (
    check_tag_limit, check_tags_known, plan_invitations, resolve_primary_contacts,
)


def test_first_guest_is_primary_when_none_flagged():
    assert resolve_primary_contacts([None, False, None]) == [True, False, False]


def test_flagged_guests_kept_when_any_flagged():
    assert resolve_primary_contacts([None, True, None]) == [False, True, False]


def test_no_guests_no_primaries():
    assert resolve_primary_contacts([]) == []


def test_plan_defaults_to_not_invited():
    ceremony, reception = uuid4(), uuid4()
    plan = plan_invitations([ceremony, reception], {ceremony: "Invited"})
    assert plan == {ceremony: "Invited", reception: "Not Invited"}


def test_plan_without_invites_covers_every_event():
    events = [uuid4(), uuid4(), uuid4()]
    assert set(plan_invitations(events, None).values()) == {"Not Invited"}
    assert list(plan_invitations(events, None)) == events


def test_plan_rejects_foreign_event():
    with pytest.raises(InputValidationError) as exc:
        plan_invitations([uuid4()], {uuid4(): "Invited"})
    assert exc.value.field == "invites"
    assert exc.value.http_status == 400


def test_plan_rejects_unknown_status():
    event = uuid4()
    with pytest.raises(ValueError):
        plan_invitations([event], {event: "Maybe"})


def test_tag_limit_allows_exactly_limit():
    check_tag_limit([uuid4() for _ in range(10)], 10)


def test_tag_limit_rejects_over_limit():
    with pytest.raises(InputValidationError) as exc:
        check_tag_limit([uuid4() for _ in range(11)], 10)
    assert exc.value.field == "tag_ids"


def test_tag_limit_counts_distinct_tags():
    tag = uuid4()
    check_tag_limit([tag] * 12, 10)


def test_unknown_tags_rejected():
    known = {uuid4()}
    with pytest.raises(InputValidationError):
        check_tags_known([uuid4()], known)


def test_known_tags_accepted():
    tag = uuid4()
    check_tags_known([tag], {tag})
