"""RSVP Tally — pure per-event response counts, no IO."""

from collections.abc import Iterable

from weddingsite.core.domain_types import RsvpStatus


def tally_responses(statuses: Iterable[str]) -> dict[str, int]:
    """Count RSVP statuses for one event.

    Anything other than Invited / Attending / Declined (Pending, Not Invited,
    unknown values) counts as not_invited.
    """
    tally = {"attending": 0, "invited": 0, "declined": 0, "not_invited": 0}
    for status in statuses:
        if status == RsvpStatus.ATTENDING.value:
            tally["attending"] += 1
        elif status == RsvpStatus.INVITED.value:
            tally["invited"] += 1
        elif status == RsvpStatus.DECLINED.value:
            tally["declined"] += 1
        else:
            tally["not_invited"] += 1
    return tally
