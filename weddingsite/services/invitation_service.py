"""Invitation Service — RSVP records per (guest, event) and their tallies.

Invariants:
    - Guest and event of an invitation belong to the same wedding
    - (guest, event) is unique; bulk provisioning skips pairs that already exist
    - Provisioning helpers flush only; the caller owns the transaction
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.domain_types import RsvpStatus
from weddingsite.core.errors import ConflictError, ResourceNotFoundError
from weddingsite.core.rsvp_tally import tally_responses
from weddingsite.models.event import Event
from weddingsite.models.guest import Guest
from weddingsite.models.invitation import Invitation
from weddingsite.schemas.invitation import InvitationCreate, InvitationUpdate
from weddingsite.services.ownership import check_wedding, get_owned

logger = logging.getLogger(__name__)


class InvitationService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_invitation(
        self, wedding_id: uuid.UUID, data: InvitationCreate,
    ) -> Invitation:
        await get_owned(self.db, Guest, data.guest_id, wedding_id, "Guest")
        await get_owned(self.db, Event, data.event_id, wedding_id, "Event")
        if await self.db.get(Invitation, (data.guest_id, data.event_id)):
            raise ConflictError("Guest is already invited to this event")
        invitation = Invitation(
            guest_id=data.guest_id, event_id=data.event_id,
            wedding_id=wedding_id, rsvp=data.rsvp.value,
        )
        self.db.add(invitation)
        await self.db.commit()
        return invitation

    async def update_invitation(
        self, wedding_id: uuid.UUID, data: InvitationUpdate,
    ) -> Invitation:
        invitation = await self.db.get(Invitation, (data.guest_id, data.event_id))
        if not invitation:
            raise ResourceNotFoundError(
                "Invitation", f"{data.guest_id}/{data.event_id}",
            )
        check_wedding(invitation.wedding_id, wedding_id, "Invitation")
        invitation.rsvp = data.rsvp.value
        await self.db.commit()
        logger.info(
            f"RSVP set to {invitation.rsvp}",
            extra={"guest_id": data.guest_id, "event_id": data.event_id},
        )
        return invitation

    async def get_all_by_wedding_id(self, wedding_id: uuid.UUID) -> list[Invitation]:
        result = await self.db.execute(
            select(Invitation)
            .where(Invitation.wedding_id == wedding_id)
            .order_by(Invitation.guest_id),
        )
        return list(result.scalars().all())

    async def get_by_event_id(
        self, event_id: uuid.UUID, wedding_id: uuid.UUID,
    ) -> list[Invitation]:
        await get_owned(self.db, Event, event_id, wedding_id, "Event")
        result = await self.db.execute(
            select(Invitation)
            .where(Invitation.event_id == event_id)
            .order_by(Invitation.guest_id),
        )
        return list(result.scalars().all())

    async def get_by_guest_id(
        self, guest_id: int, wedding_id: uuid.UUID,
    ) -> list[Invitation]:
        await get_owned(self.db, Guest, guest_id, wedding_id, "Guest")
        result = await self.db.execute(
            select(Invitation).where(Invitation.guest_id == guest_id),
        )
        return list(result.scalars().all())

    async def get_stats_for_event(self, event_id: uuid.UUID) -> dict[str, int]:
        result = await self.db.execute(
            select(Invitation.rsvp).where(Invitation.event_id == event_id),
        )
        return tally_responses(result.scalars().all())

    async def get_stats_by_event(self, wedding_id: uuid.UUID) -> dict[uuid.UUID, dict[str, int]]:
        """Tallies for every event of a wedding that has invitations."""
        result = await self.db.execute(
            select(Invitation.event_id, Invitation.rsvp)
            .where(Invitation.wedding_id == wedding_id),
        )
        statuses: dict[uuid.UUID, list[str]] = {}
        for event_id, rsvp in result.all():
            statuses.setdefault(event_id, []).append(rsvp)
        return {event_id: tally_responses(values) for event_id, values in statuses.items()}

    async def create_for_guest_and_events(
        self, wedding_id: uuid.UUID, guest_id: int, event_ids: Iterable[uuid.UUID],
        rsvp: RsvpStatus = RsvpStatus.NOT_INVITED,
    ) -> int:
        return await self.create_for_guests_and_events(
            wedding_id, [guest_id], event_ids, rsvp,
        )

    async def create_for_guests_and_events(
        self, wedding_id: uuid.UUID, guest_ids: Iterable[int],
        event_ids: Iterable[uuid.UUID], rsvp: RsvpStatus = RsvpStatus.NOT_INVITED,
    ) -> int:
        """Invite every guest to every event. Flushes; returns how many were created."""
        guest_ids, event_ids = list(guest_ids), list(event_ids)
        if not guest_ids or not event_ids:
            return 0
        result = await self.db.execute(
            select(Invitation.guest_id, Invitation.event_id)
            .where(Invitation.guest_id.in_(guest_ids))
            .where(Invitation.event_id.in_(event_ids)),
        )
        existing = set(result.tuples().all())
        created = 0
        for guest_id in guest_ids:
            for event_id in event_ids:
                if (guest_id, event_id) in existing:
                    continue
                self.db.add(Invitation(
                    guest_id=guest_id, event_id=event_id,
                    wedding_id=wedding_id, rsvp=RsvpStatus(rsvp).value,
                ))
                created += 1
        await self.db.flush()
        return created
