"""Guest Tag Service — wedding-scoped labels for organizing guests.

Invariants:
    - Tag names are unique per wedding (409 on duplicate)
    - seed_initial_tags is idempotent: existing names are skipped
"""

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.domain_types import DEFAULT_GUEST_TAGS
from weddingsite.core.errors import ConflictError, ErrorContext
from weddingsite.models.guest_tag import GuestTag, GuestTagAssignment
from weddingsite.schemas.guest_tag import (
    GuestTagCreate, GuestTagOut, GuestTagUpdate, GuestTagWithCount,
)
from weddingsite.services.ownership import get_owned

logger = logging.getLogger(__name__)


class GuestTagService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, wedding_id: uuid.UUID, data: GuestTagCreate) -> GuestTag:
        await self._check_name_free(wedding_id, data.name)
        tag = GuestTag(wedding_id=wedding_id, name=data.name, color=data.color)
        self.db.add(tag)
        await self.db.commit()
        logger.info(f"Guest tag created: {tag.name}", extra={"wedding_id": wedding_id})
        return tag

    async def get_by_wedding_id(self, wedding_id: uuid.UUID) -> list[GuestTag]:
        result = await self.db.execute(
            select(GuestTag)
            .where(GuestTag.wedding_id == wedding_id)
            .order_by(GuestTag.name),
        )
        return list(result.scalars().all())

    async def get_by_id_with_count(
        self, wedding_id: uuid.UUID, tag_id: uuid.UUID,
    ) -> GuestTagWithCount:
        tag = await get_owned(self.db, GuestTag, tag_id, wedding_id, "GuestTag")
        result = await self.db.execute(
            select(func.count())
            .select_from(GuestTagAssignment)
            .where(GuestTagAssignment.guest_tag_id == tag_id),
        )
        return GuestTagWithCount(
            **GuestTagOut.model_validate(tag).model_dump(),
            guest_count=result.scalar_one(),
        )

    async def update(
        self, wedding_id: uuid.UUID, tag_id: uuid.UUID, data: GuestTagUpdate,
    ) -> GuestTag:
        tag = await get_owned(self.db, GuestTag, tag_id, wedding_id, "GuestTag")
        values = data.model_dump(exclude_unset=True)
        if values.get("name") and values["name"] != tag.name:
            await self._check_name_free(wedding_id, values["name"])
        for key, value in values.items():
            if key == "name" and value is None:
                continue
            setattr(tag, key, value)
        await self.db.commit()
        return tag

    async def delete(self, wedding_id: uuid.UUID, tag_id: uuid.UUID) -> uuid.UUID:
        tag = await get_owned(self.db, GuestTag, tag_id, wedding_id, "GuestTag")
        await self.db.delete(tag)
        await self.db.commit()
        logger.info(f"Guest tag deleted: {tag_id}", extra={"wedding_id": wedding_id})
        return tag_id

    async def seed_initial_tags(self, wedding_id: uuid.UUID) -> None:
        """Add the default tags to a wedding. Flushes; the caller commits."""
        result = await self.db.execute(
            select(GuestTag.name).where(GuestTag.wedding_id == wedding_id),
        )
        existing = set(result.scalars().all())
        for name, color in DEFAULT_GUEST_TAGS:
            if name not in existing:
                self.db.add(GuestTag(wedding_id=wedding_id, name=name, color=color))
        await self.db.flush()

    async def get_tag_ids(self, wedding_id: uuid.UUID) -> set[uuid.UUID]:
        result = await self.db.execute(
            select(GuestTag.id).where(GuestTag.wedding_id == wedding_id),
        )
        return set(result.scalars().all())

    async def _check_name_free(self, wedding_id: uuid.UUID, name: str) -> None:
        result = await self.db.execute(
            select(GuestTag.id)
            .where(GuestTag.wedding_id == wedding_id)
            .where(GuestTag.name == name),
        )
        if result.scalar_one_or_none() is not None:
            raise ConflictError(
                f"A tag named '{name}' already exists",
                ErrorContext(wedding_id=str(wedding_id), resource="GuestTag"),
            )
