"""Guest Routes — guest listing, edits and removal."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.guest import GuestBulkDelete, GuestOut, GuestUpdate
from weddingsite.services.guest_service import GuestService

router = APIRouter(prefix="/api/v1/guests", tags=["guests"])


@router.get("", response_model=list[GuestOut])
async def list_guests(
    household_id: uuid.UUID | None = Query(None),
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    """All guests of the wedding, or of one household when household_id is given."""
    service = GuestService(db)
    if household_id is not None:
        household = await service.get_all_by_household_id(wedding_id, household_id)
        return household.guests
    return await service.get_all_by_wedding_id(wedding_id)


@router.post("/bulk-delete")
async def delete_guests(
    body: GuestBulkDelete,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    deleted = await GuestService(db).delete_guests(wedding_id, body.guest_ids)
    return {"ids": deleted}


@router.get("/{guest_id}", response_model=GuestOut)
async def get_guest(
    guest_id: int,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GuestService(db).get_by_id_with_invitations(guest_id, wedding_id)


@router.patch("/{guest_id}", response_model=GuestOut)
async def update_guest(
    guest_id: int,
    body: GuestUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GuestService(db).update_guest(wedding_id, guest_id, body)


@router.delete("/{guest_id}")
async def delete_guest(
    guest_id: int,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return {"id": await GuestService(db).delete_guest(wedding_id, guest_id)}
