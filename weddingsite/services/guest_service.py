"""Guest Service — individual guest reads, edits and removal.

Invariants:
    - Guests are addressed only within the caller's wedding (403 otherwise)
    - tag_ids, when given, replaces the guest's tag set exactly
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.config import get_settings
from weddingsite.core.guest_party import check_tag_limit, check_tags_known
from weddingsite.core.errors import ResourceNotFoundError
from weddingsite.models.guest import Guest
from weddingsite.models.guest_tag import GuestTagAssignment
from weddingsite.models.household import Household
from weddingsite.schemas.guest import GuestUpdate
from weddingsite.services.guest_tag_service import GuestTagService
from weddingsite.services.ownership import check_wedding, get_owned

logger = logging.getLogger(__name__)


def replace_guest_tags(guest: Guest, tag_ids: Iterable[uuid.UUID]) -> None:
    """Make the guest's assignments match `tag_ids`, keeping rows that stay."""
    wanted = list(dict.fromkeys(tag_ids))
    for assignment in list(guest.tag_assignments):
        if assignment.guest_tag_id not in wanted:
            guest.tag_assignments.remove(assignment)
    have = {assignment.guest_tag_id for assignment in guest.tag_assignments}
    for tag_id in wanted:
        if tag_id not in have:
            guest.tag_assignments.append(GuestTagAssignment(guest_tag_id=tag_id))


class GuestService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_by_wedding_id(self, wedding_id: uuid.UUID | None) -> list[Guest] | None:
        if wedding_id is None:
            return None
        result = await self.db.execute(
            select(Guest).where(Guest.wedding_id == wedding_id).order_by(Guest.id),
        )
        return list(result.scalars().all())

    async def get_all_by_household_id(
        self, wedding_id: uuid.UUID, household_id: uuid.UUID,
    ) -> Household:
        return await get_owned(self.db, Household, household_id, wedding_id, "Household")

    async def get_by_id(self, guest_id: int, wedding_id: uuid.UUID) -> Guest:
        return await get_owned(self.db, Guest, guest_id, wedding_id, "Guest")

    async def get_by_id_with_invitations(self, guest_id: int, wedding_id: uuid.UUID) -> Guest:
        """Guest with a fresh read of its invitations (RSVPs change from the public site)."""
        guest = await self.get_by_id(guest_id, wedding_id)
        await self.db.refresh(guest, attribute_names=["invitations"])
        return guest

    async def update_guest(
        self, wedding_id: uuid.UUID, guest_id: int, data: GuestUpdate,
    ) -> Guest:
        guest = await self.get_by_id(guest_id, wedding_id)
        values = data.model_dump(exclude_unset=True, exclude={"tag_ids"})
        for key in ("first_name", "last_name", "age_group"):
            if key in values and values[key] is None:
                del values[key]
        if "age_group" in values:
            values["age_group"] = values["age_group"].value
        if data.tag_ids is not None:
            check_tag_limit(data.tag_ids, get_settings().max_tags_per_guest)
            known = await GuestTagService(self.db).get_tag_ids(wedding_id)
            check_tags_known(data.tag_ids, known)
            replace_guest_tags(guest, data.tag_ids)
        for key, value in values.items():
            setattr(guest, key, value)
        await self.db.commit()
        logger.info("Guest updated", extra={"wedding_id": wedding_id, "guest_id": guest_id})
        return guest

    async def delete_guest(self, wedding_id: uuid.UUID, guest_id: int) -> int:
        guest = await self.get_by_id(guest_id, wedding_id)
        await self.db.delete(guest)
        await self.db.commit()
        logger.info("Guest deleted", extra={"wedding_id": wedding_id, "guest_id": guest_id})
        return guest_id

    async def delete_guests(self, wedding_id: uuid.UUID, guest_ids: list[int]) -> list[int]:
        """Delete several guests at once; all must exist and belong to the wedding."""
        guest_ids = list(dict.fromkeys(guest_ids))
        result = await self.db.execute(select(Guest).where(Guest.id.in_(guest_ids)))
        guests = {guest.id: guest for guest in result.scalars().all()}
        missing = [str(guest_id) for guest_id in guest_ids if guest_id not in guests]
        if missing:
            raise ResourceNotFoundError("Guest", ", ".join(missing))
        for guest in guests.values():
            check_wedding(guest.wedding_id, wedding_id, "Guest")
        for guest in guests.values():
            await self.db.delete(guest)
        await self.db.commit()
        logger.info(
            f"Deleted {len(guest_ids)} guests", extra={"wedding_id": wedding_id},
        )
        return guest_ids
