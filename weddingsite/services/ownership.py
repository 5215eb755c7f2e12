"""Tenant ownership checks shared by the domain services."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.errors import ErrorContext, ForbiddenError, ResourceNotFoundError


async def get_owned(db: AsyncSession, model, key, wedding_id: uuid.UUID, resource: str):
    """Load `model` by primary key, 404 if missing, 403 if it belongs to another wedding."""
    obj = await db.get(model, key)
    if obj is None:
        raise ResourceNotFoundError(resource, str(key))
    check_wedding(obj.wedding_id, wedding_id, resource)
    return obj


def check_wedding(owner_wedding_id, wedding_id, resource: str) -> None:
    if owner_wedding_id != wedding_id:
        raise ForbiddenError(
            f"{resource} does not belong to your wedding",
            ErrorContext(wedding_id=str(wedding_id), resource=resource),
        )
