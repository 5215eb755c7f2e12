"""Guest Tag Routes — wedding-scoped labels."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.guest_tag import (
    GuestTagCreate, GuestTagOut, GuestTagUpdate, GuestTagWithCount,
)
from weddingsite.services.guest_tag_service import GuestTagService

router = APIRouter(prefix="/api/v1/guest-tags", tags=["guest-tags"])


@router.get("", response_model=list[GuestTagOut])
async def list_tags(
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GuestTagService(db).get_by_wedding_id(wedding_id)


@router.post("", response_model=GuestTagOut, status_code=status.HTTP_201_CREATED)
async def create_tag(
    body: GuestTagCreate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GuestTagService(db).create(wedding_id, body)


@router.get("/{tag_id}", response_model=GuestTagWithCount)
async def get_tag(
    tag_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GuestTagService(db).get_by_id_with_count(wedding_id, tag_id)


@router.patch("/{tag_id}", response_model=GuestTagOut)
async def update_tag(
    tag_id: uuid.UUID,
    body: GuestTagUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GuestTagService(db).update(wedding_id, tag_id, body)


@router.delete("/{tag_id}")
async def delete_tag(
    tag_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    deleted = await GuestTagService(db).delete(wedding_id, tag_id)
    return {"id": str(deleted)}
