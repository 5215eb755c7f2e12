"""Guest Party Rules — pure decisions for provisioning a household's guests.

Invariants:
    - Exactly one primary contact when the form names none (the first guest)
    - Every wedding event gets an RSVP decision for every guest
    - Invites may only reference events of the wedding
    - A guest carries at most `limit` tags

Design Decisions:
    - Pure functions raising InputValidationError: services stay thin and these
      rules are testable without a database
"""

from collections.abc import Iterable, Mapping
from typing import Hashable

from weddingsite.core.domain_types import RsvpStatus
from weddingsite.core.errors import InputValidationError


def resolve_primary_contacts(flags: list[bool | None]) -> list[bool]:
    """Use the submitted flags when any guest is marked primary, else the first guest."""
    if any(flags):
        return [bool(flag) for flag in flags]
    return [index == 0 for index in range(len(flags))]


def plan_invitations(
    event_ids: Iterable[Hashable],
    invites: Mapping[Hashable, str] | None,
) -> dict:
    """RSVP status per wedding event; events missing from `invites` are Not Invited."""
    event_ids = list(event_ids)
    known = set(event_ids)
    invites = invites or {}
    unknown = [str(event_id) for event_id in invites if event_id not in known]
    if unknown:
        raise InputValidationError(
            f"Invites reference events outside this wedding: {', '.join(unknown)}",
            field="invites",
        )
    return {
        event_id: RsvpStatus(invites.get(event_id, RsvpStatus.NOT_INVITED)).value
        for event_id in event_ids
    }


def check_tag_limit(tag_ids: list | None, limit: int) -> None:
    if tag_ids and len(set(tag_ids)) > limit:
        raise InputValidationError(
            f"A guest can have at most {limit} tags", field="tag_ids",
        )


def check_tags_known(tag_ids: Iterable[Hashable], known_tag_ids: set) -> None:
    unknown = [str(tag_id) for tag_id in tag_ids if tag_id not in known_tag_ids]
    if unknown:
        raise InputValidationError(
            f"Tags do not belong to this wedding: {', '.join(unknown)}",
            field="tag_ids",
        )
