"""Gift Service — gift and thank-you tracking per (household, event).

Invariants:
    - Household and event of a gift belong to the same wedding
    - New gift rows start with thankyou=False
    - Provisioning helpers flush only; the caller owns the transaction
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.errors import ResourceNotFoundError
from weddingsite.models.event import Event
from weddingsite.models.gift import Gift
from weddingsite.models.household import Household
from weddingsite.schemas.gift import GiftUpdate
from weddingsite.services.ownership import check_wedding, get_owned

logger = logging.getLogger(__name__)


class GiftService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(
        self, household_id: uuid.UUID, event_id: uuid.UUID, wedding_id: uuid.UUID,
    ) -> Gift:
        await self._check_household(household_id, wedding_id)
        gift = await self.db.get(Gift, (household_id, event_id))
        if not gift:
            raise ResourceNotFoundError("Gift", f"{household_id}/{event_id}")
        return gift

    async def update_gift(self, wedding_id: uuid.UUID, data: GiftUpdate) -> Gift:
        gift = await self.get_by_id(data.household_id, data.event_id, wedding_id)
        for key, value in data.model_dump(
            exclude_unset=True, include={"description", "thankyou"},
        ).items():
            if key == "thankyou" and value is None:
                continue
            setattr(gift, key, value)
        await self.db.commit()
        return gift

    async def upsert_gift(self, wedding_id: uuid.UUID, data: GiftUpdate) -> Gift:
        await self._check_household(data.household_id, wedding_id)
        gift = await self.db.get(Gift, (data.household_id, data.event_id))
        if gift:
            return await self.update_gift(wedding_id, data)
        event = await get_owned(self.db, Event, data.event_id, wedding_id, "Event")
        gift = Gift(
            household_id=data.household_id, event_id=event.id, event=event,
            description=data.description, thankyou=bool(data.thankyou),
        )
        self.db.add(gift)
        await self.db.commit()
        return gift

    async def mark_thank_you_sent(
        self, wedding_id: uuid.UUID, household_id: uuid.UUID, event_id: uuid.UUID,
    ) -> Gift:
        gift = await self.get_by_id(household_id, event_id, wedding_id)
        gift.thankyou = True
        await self.db.commit()
        logger.info(
            "Thank-you marked as sent",
            extra={"household_id": household_id, "event_id": event_id},
        )
        return gift

    async def get_by_household_id(
        self, household_id: uuid.UUID, wedding_id: uuid.UUID,
    ) -> list[Gift]:
        await self._check_household(household_id, wedding_id)
        result = await self.db.execute(
            select(Gift).where(Gift.household_id == household_id),
        )
        return list(result.scalars().all())

    async def get_by_event_id(
        self, event_id: uuid.UUID, wedding_id: uuid.UUID,
    ) -> list[Gift]:
        await get_owned(self.db, Event, event_id, wedding_id, "Event")
        result = await self.db.execute(
            select(Gift).where(Gift.event_id == event_id),
        )
        return list(result.scalars().all())

    async def create_for_household_and_events(
        self, household_id: uuid.UUID, events: Iterable[Event],
    ) -> int:
        return await self.create_for_households_and_events([household_id], events)

    async def create_for_households_and_events(
        self, household_ids: Iterable[uuid.UUID], events: Iterable[Event],
    ) -> int:
        """One gift row per (household, event) pair missing one. Flushes."""
        household_ids, events = list(household_ids), list(events)
        if not household_ids or not events:
            return 0
        result = await self.db.execute(
            select(Gift.household_id, Gift.event_id)
            .where(Gift.household_id.in_(household_ids))
            .where(Gift.event_id.in_([event.id for event in events])),
        )
        existing = set(result.tuples().all())
        created = 0
        for household_id in household_ids:
            for event in events:
                if (household_id, event.id) in existing:
                    continue
                self.db.add(Gift(
                    household_id=household_id, event_id=event.id, event=event,
                    thankyou=False,
                ))
                created += 1
        await self.db.flush()
        return created

    async def _check_household(
        self, household_id: uuid.UUID, wedding_id: uuid.UUID,
    ) -> None:
        result = await self.db.execute(
            select(Household.wedding_id).where(Household.id == household_id),
        )
        owner = result.scalar_one_or_none()
        if owner is None:
            raise ResourceNotFoundError("Household", str(household_id))
        check_wedding(owner, wedding_id, "Household")
