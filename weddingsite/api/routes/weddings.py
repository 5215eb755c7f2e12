"""Wedding Routes — onboarding and the couple's wedding profile."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_current_user_id, get_optional_user_id, get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.wedding import WeddingCreate, WeddingResponse, WeddingUpdate
from weddingsite.services.wedding_service import WeddingService

router = APIRouter(prefix="/api/v1/weddings", tags=["weddings"])


@router.post("", response_model=WeddingResponse, status_code=status.HTTP_201_CREATED)
async def create_wedding(
    body: WeddingCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await WeddingService(db).create_wedding(user_id, body)


@router.get("/me", response_model=WeddingResponse | None)
async def get_my_wedding(
    user_id: str | None = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await WeddingService(db).get_by_user_id(user_id)


@router.get("/me/exists")
async def has_wedding(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return {"has_wedding": await WeddingService(db).has_wedding(user_id)}


@router.patch("/me", response_model=WeddingResponse)
async def update_my_wedding(
    body: WeddingUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await WeddingService(db).update_wedding(wedding_id, body)
