"""Event Service — wedding events and the invitations/gifts they provision.

Invariants:
    - A new event gets a "Not Invited" invitation for every existing guest of the
      wedding and a gift row for every existing household, in the same transaction
    - Events are addressed only within the caller's wedding (403 otherwise)
    - Deleting an event cascades to invitations, gifts and questions

Design Decisions:
    - add_event flushes without committing so wedding onboarding can create the
      "Wedding Day" event inside its own transaction
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.models.event import Event
from weddingsite.models.guest import Guest
from weddingsite.models.household import Household
from weddingsite.schemas.event import (
    EventCreate, EventResponse, EventUpdate, EventWithStats, RsvpStats,
)
from weddingsite.services.gift_service import GiftService
from weddingsite.services.invitation_service import InvitationService
from weddingsite.services.ownership import get_owned

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_event(self, wedding_id: uuid.UUID, data: EventCreate) -> Event:
        """Insert the event and provision invitations and gifts. Flushes only."""
        event = Event(wedding_id=wedding_id, questions=[], **data.model_dump())
        self.db.add(event)
        await self.db.flush()

        guest_ids = (await self.db.execute(
            select(Guest.id).where(Guest.wedding_id == wedding_id),
        )).scalars().all()
        await InvitationService(self.db).create_for_guests_and_events(
            wedding_id, guest_ids, [event.id],
        )
        household_ids = (await self.db.execute(
            select(Household.id).where(Household.wedding_id == wedding_id),
        )).scalars().all()
        await GiftService(self.db).create_for_households_and_events(
            household_ids, [event],
        )
        return event

    async def create_event(self, wedding_id: uuid.UUID, data: EventCreate) -> Event:
        event = await self.add_event(wedding_id, data)
        await self.db.commit()
        logger.info(
            f"Event created: {event.name}",
            extra={"wedding_id": wedding_id, "event_id": event.id},
        )
        return event

    async def get_wedding_events(self, wedding_id: uuid.UUID | None) -> list[Event] | None:
        if wedding_id is None:
            return None
        result = await self.db.execute(
            select(Event)
            .where(Event.wedding_id == wedding_id)
            .order_by(Event.created_at),
        )
        return list(result.scalars().all())

    async def get_wedding_events_with_stats(
        self, wedding_id: uuid.UUID | None,
    ) -> list[EventWithStats] | None:
        events = await self.get_wedding_events(wedding_id)
        if events is None:
            return None
        stats = await InvitationService(self.db).get_stats_by_event(wedding_id)
        return [
            EventWithStats(
                **EventResponse.model_validate(event).model_dump(),
                guest_responses=RsvpStats(**stats.get(event.id, {})),
            )
            for event in events
        ]

    async def get_by_id(self, event_id: uuid.UUID, wedding_id: uuid.UUID) -> Event:
        return await get_owned(self.db, Event, event_id, wedding_id, "Event")

    async def update_event(
        self, wedding_id: uuid.UUID, event_id: uuid.UUID, data: EventUpdate,
    ) -> Event:
        event = await self.get_by_id(event_id, wedding_id)
        for key, value in data.model_dump().items():
            setattr(event, key, value)
        await self.db.commit()
        logger.info(
            f"Event updated: {event.name}",
            extra={"wedding_id": wedding_id, "event_id": event_id},
        )
        return event

    async def update_collect_rsvp(
        self, wedding_id: uuid.UUID, event_id: uuid.UUID, collect_rsvp: bool,
    ) -> Event:
        event = await self.get_by_id(event_id, wedding_id)
        event.collect_rsvp = collect_rsvp
        await self.db.commit()
        return event

    async def delete_event(self, event_id: uuid.UUID, wedding_id: uuid.UUID) -> uuid.UUID:
        event = await self.get_by_id(event_id, wedding_id)
        await self.db.delete(event)
        await self.db.commit()
        logger.info(
            "Event deleted", extra={"wedding_id": wedding_id, "event_id": event_id},
        )
        return event_id
