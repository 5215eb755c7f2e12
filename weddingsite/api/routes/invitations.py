"""Invitation Routes — per-guest, per-event RSVP records."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.invitation import InvitationCreate, InvitationOut, InvitationUpdate
from weddingsite.services.invitation_service import InvitationService

router = APIRouter(prefix="/api/v1/invitations", tags=["invitations"])


@router.get("", response_model=list[InvitationOut])
async def list_invitations(
    event_id: uuid.UUID | None = Query(None),
    guest_id: int | None = Query(None),
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    service = InvitationService(db)
    if event_id is not None:
        return await service.get_by_event_id(event_id, wedding_id)
    if guest_id is not None:
        return await service.get_by_guest_id(guest_id, wedding_id)
    return await service.get_all_by_wedding_id(wedding_id)


@router.post("", response_model=InvitationOut, status_code=status.HTTP_201_CREATED)
async def create_invitation(
    body: InvitationCreate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await InvitationService(db).create_invitation(wedding_id, body)


@router.put("", response_model=InvitationOut)
async def update_invitation(
    body: InvitationUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await InvitationService(db).update_invitation(wedding_id, body)
