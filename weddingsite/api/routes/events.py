"""Event Routes — wedding events, RSVP collection toggles and per-event tallies."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.event import (
    CollectRsvpUpdate, EventCreate, EventResponse, EventUpdate, EventWithStats, RsvpStats,
)
from weddingsite.services.event_service import EventService
from weddingsite.services.invitation_service import InvitationService

router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.get("", response_model=list[EventWithStats])
async def list_events(
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    """Events in creation order, each with its guest response tally."""
    return await EventService(db).get_wedding_events_with_stats(wedding_id)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    body: EventCreate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).create_event(wedding_id, body)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).get_by_id(event_id, wedding_id)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: uuid.UUID,
    body: EventUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).update_event(wedding_id, event_id, body)


@router.patch("/{event_id}/collect-rsvp", response_model=EventResponse)
async def update_collect_rsvp(
    event_id: uuid.UUID,
    body: CollectRsvpUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).update_collect_rsvp(
        wedding_id, event_id, body.collect_rsvp,
    )


@router.get("/{event_id}/rsvp-stats", response_model=RsvpStats)
async def get_rsvp_stats(
    event_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    await EventService(db).get_by_id(event_id, wedding_id)
    return await InvitationService(db).get_stats_for_event(event_id)


@router.delete("/{event_id}")
async def delete_event(
    event_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    deleted = await EventService(db).delete_event(event_id, wedding_id)
    return {"id": str(deleted)}
