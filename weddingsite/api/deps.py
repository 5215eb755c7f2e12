"""Request Dependencies — caller identity and tenant resolution.

Invariants:
    - The caller's user id arrives in X-User-Id, set by the upstream auth layer
    - Protected routes fail with 401 when the header is missing
    - The tenant is the caller's primary wedding (404 until onboarding completes)

Design Decisions:
    - Header identity over in-process session handling: authentication lives in
      front of this service
"""

import uuid

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.errors import ResourceNotFoundError, UnauthorizedError
from weddingsite.infrastructure.database import get_db
from weddingsite.services.wedding_service import WeddingService


async def get_optional_user_id(
    x_user_id: str | None = Header(default=None),
) -> str | None:
    if x_user_id is None:
        return None
    return x_user_id.strip() or None


async def get_current_user_id(
    user_id: str | None = Depends(get_optional_user_id),
) -> str:
    if not user_id:
        raise UnauthorizedError("Missing X-User-Id header")
    return user_id


async def get_wedding_id(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> uuid.UUID:
    wedding = await WeddingService(db).get_by_user_id(user_id)
    if not wedding:
        raise ResourceNotFoundError(
            "Wedding",
            message="No wedding found for user. Please complete onboarding first.",
        )
    return wedding.id
