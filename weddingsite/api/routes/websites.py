"""Website Routes — enabling and configuring the couple's public website."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_current_user_id, get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.website import (
    CoverPhotoUpdate, RsvpEnabledUpdate, WebsiteEnable, WebsiteResponse, WebsiteUpdate,
)
from weddingsite.services.website_service import WebsiteService
from weddingsite.services.wedding_service import WeddingService

router = APIRouter(prefix="/api/v1/websites", tags=["websites"])


@router.post("", response_model=WebsiteResponse, status_code=status.HTTP_201_CREATED)
async def enable_website(
    body: WebsiteEnable,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Publish the wedding website (412 until the wedding exists)."""
    wedding = await WeddingService(db).get_by_user_id(user_id)
    return await WebsiteService(db).enable_website(
        wedding.id if wedding else None, user_id, body,
    )


@router.get("/me", response_model=WebsiteResponse | None)
async def get_my_website(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    wedding = await WeddingService(db).get_by_user_id(user_id)
    return await WebsiteService(db).get_by_wedding_id(wedding.id if wedding else None)


@router.patch("/me", response_model=WebsiteResponse)
async def update_my_website(
    body: WebsiteUpdate,
    user_id: str = Depends(get_current_user_id),
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await WebsiteService(db).update_website(wedding_id, user_id, body)


@router.patch("/me/cover-photo", response_model=WebsiteResponse)
async def update_cover_photo(
    body: CoverPhotoUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await WebsiteService(db).update_cover_photo(wedding_id, body.cover_photo_url)


@router.patch("/{website_id}/rsvp-enabled", response_model=WebsiteResponse)
async def update_rsvp_enabled(
    website_id: uuid.UUID,
    body: RsvpEnabledUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await WebsiteService(db).update_rsvp_enabled(
        wedding_id, website_id, body.is_rsvp_enabled,
    )
