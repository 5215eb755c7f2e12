"""Wedding Service — onboarding and the couple's wedding profile.

Invariants:
    - A user owns at most one wedding (400 on a second create)
    - Creating a wedding links the user as primary owner, seeds the default guest
      tags and, when the couple gave a date or location, creates the "Wedding Day"
      event, all in one transaction
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.domain_types import WEDDING_DAY_EVENT, WeddingRole
from weddingsite.core.errors import BusinessRuleError, ResourceNotFoundError
from weddingsite.models.user import User
from weddingsite.models.wedding import UserWedding, Wedding
from weddingsite.schemas.event import EventCreate
from weddingsite.schemas.wedding import WeddingCreate, WeddingUpdate
from weddingsite.services.event_service import EventService
from weddingsite.services.guest_tag_service import GuestTagService

logger = logging.getLogger(__name__)


class WeddingService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_wedding(self, user_id: str, data: WeddingCreate) -> Wedding:
        user = await self.db.get(User, user_id)
        if not user:
            raise ResourceNotFoundError("User", user_id)
        if await self.has_wedding(user_id):
            raise BusinessRuleError("User already has a wedding", code="WEDDING_EXISTS")

        wedding = Wedding(
            groom_first_name=data.groom_first_name,
            groom_middle_name=data.groom_middle_name,
            groom_last_name=data.groom_last_name,
            bride_first_name=data.bride_first_name,
            bride_middle_name=data.bride_middle_name,
            bride_last_name=data.bride_last_name,
            enabled_add_ons=[],
        )
        self.db.add(wedding)
        await self.db.flush()
        self.db.add(UserWedding(
            user_id=user_id, wedding_id=wedding.id,
            role=WeddingRole.OWNER.value, is_primary=True,
        ))
        await GuestTagService(self.db).seed_initial_tags(wedding.id)

        user.groom_first_name = data.groom_first_name
        user.groom_last_name = data.groom_last_name
        user.bride_first_name = data.bride_first_name
        user.bride_last_name = data.bride_last_name

        if data.has_wedding_details and (data.wedding_date or data.wedding_location):
            await EventService(self.db).add_event(wedding.id, EventCreate(
                name=WEDDING_DAY_EVENT,
                date=data.wedding_date,
                venue=data.wedding_location,
                collect_rsvp=True,
            ))

        await self.db.commit()
        logger.info("Wedding created", extra={"wedding_id": wedding.id, "user_id": user_id})
        return wedding

    async def update_wedding(self, wedding_id: uuid.UUID, data: WeddingUpdate) -> Wedding:
        wedding = await self.get_by_id(wedding_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None and key not in ("groom_middle_name", "bride_middle_name"):
                continue
            setattr(wedding, key, list(value) if key == "enabled_add_ons" else value)
        await self.db.commit()
        logger.info("Wedding updated", extra={"wedding_id": wedding_id})
        return wedding

    async def get_by_id(self, wedding_id: uuid.UUID) -> Wedding:
        wedding = await self.db.get(Wedding, wedding_id)
        if not wedding:
            raise ResourceNotFoundError("Wedding", str(wedding_id))
        return wedding

    async def get_by_user_id(self, user_id: str | None) -> Wedding | None:
        """The user's primary wedding (falling back to the oldest membership)."""
        if not user_id:
            return None
        result = await self.db.execute(
            select(Wedding)
            .join(UserWedding, UserWedding.wedding_id == Wedding.id)
            .where(UserWedding.user_id == user_id)
            .order_by(UserWedding.is_primary.desc(), UserWedding.created_at)
            .limit(1),
        )
        return result.scalar_one_or_none()

    async def has_wedding(self, user_id: str) -> bool:
        result = await self.db.execute(
            select(UserWedding.id).where(UserWedding.user_id == user_id).limit(1),
        )
        return result.scalar_one_or_none() is not None
