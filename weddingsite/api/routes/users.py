"""User Routes — profile registration and self-service profile edits."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_current_user_id, get_optional_user_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.user import UserProfileUpdate, UserRegister, UserResponse
from weddingsite.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    body: UserRegister,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await UserService(db).register_user(user_id, body)


@router.get("/me", response_model=UserResponse | None)
async def get_current_user(
    user_id: str | None = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Current profile, or null when signed out or not yet registered."""
    return await UserService(db).get_current_user(user_id)


@router.patch("/me", response_model=UserResponse)
async def update_my_profile(
    body: UserProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await UserService(db).update_profile(user_id, user_id, body)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    requesting_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await UserService(db).get_by_id(user_id, requesting_user_id)
