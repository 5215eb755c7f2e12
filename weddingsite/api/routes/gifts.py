"""Gift Routes — gifts and thank-you notes per household and event."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.core.errors import InputValidationError
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.gift import GiftOut, GiftUpdate, ThankYouRequest
from weddingsite.services.gift_service import GiftService

router = APIRouter(prefix="/api/v1/gifts", tags=["gifts"])


@router.get("", response_model=list[GiftOut])
async def list_gifts(
    household_id: uuid.UUID | None = Query(None),
    event_id: uuid.UUID | None = Query(None),
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    """Gifts of one household or of one event."""
    service = GiftService(db)
    if household_id is not None and event_id is not None:
        return [await service.get_by_id(household_id, event_id, wedding_id)]
    if household_id is not None:
        return await service.get_by_household_id(household_id, wedding_id)
    if event_id is not None:
        return await service.get_by_event_id(event_id, wedding_id)
    raise InputValidationError("household_id or event_id is required", field="household_id")


@router.put("", response_model=GiftOut)
async def upsert_gift(
    body: GiftUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GiftService(db).upsert_gift(wedding_id, body)


@router.patch("", response_model=GiftOut)
async def update_gift(
    body: GiftUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GiftService(db).update_gift(wedding_id, body)


@router.post("/thank-you", response_model=GiftOut)
async def mark_thank_you_sent(
    body: ThankYouRequest,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await GiftService(db).mark_thank_you_sent(
        wedding_id, body.household_id, body.event_id,
    )
