"""Household Routes — the household + guest party aggregate."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.household import HouseholdCreate, HouseholdOut, HouseholdUpdate
from weddingsite.services.household_management import HouseholdManagementService

router = APIRouter(prefix="/api/v1/households", tags=["households"])


@router.get("", response_model=list[HouseholdOut])
async def list_households(
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await HouseholdManagementService(db).get_wedding_households(wedding_id)


@router.post("", response_model=HouseholdOut, status_code=status.HTTP_201_CREATED)
async def create_household(
    body: HouseholdCreate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a household with its guests, invitations and gifts in one go."""
    return await HouseholdManagementService(db).create_household_with_guests(
        wedding_id, body,
    )


@router.get("/{household_id}", response_model=HouseholdOut)
async def get_household(
    household_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await HouseholdManagementService(db).get_household(wedding_id, household_id)


@router.put("/{household_id}", response_model=HouseholdOut)
async def update_household(
    household_id: uuid.UUID,
    body: HouseholdUpdate,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await HouseholdManagementService(db).update_household_with_guests(
        wedding_id, household_id, body,
    )


@router.delete("/{household_id}")
async def delete_household(
    household_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    deleted = await HouseholdManagementService(db).delete_household(
        wedding_id, household_id,
    )
    return {"id": str(deleted)}
