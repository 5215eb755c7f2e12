"""User Service — profiles of authenticated identities.

Invariants:
    - A user may only read or edit their own profile (403 otherwise)
    - email stays unique across users (409 on collision)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.errors import ConflictError, ForbiddenError, ResourceNotFoundError
from weddingsite.models.user import User
from weddingsite.schemas.user import UserProfileUpdate, UserRegister

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def register_user(self, user_id: str, data: UserRegister) -> User:
        """Create the profile for an identity the auth layer already verified."""
        if await self.db.get(User, user_id):
            raise ConflictError("User profile already exists")
        await self._check_email_free(data.email)
        user = User(id=user_id, email=data.email, name=data.name)
        self.db.add(user)
        await self.db.commit()
        logger.info("User registered", extra={"user_id": user_id})
        return user

    async def get_current_user(self, user_id: str | None) -> User | None:
        if not user_id:
            return None
        return await self.db.get(User, user_id)

    async def get_by_id(self, user_id: str, requesting_user_id: str) -> User:
        if user_id != requesting_user_id:
            raise ForbiddenError("You can only access your own profile")
        user = await self.db.get(User, user_id)
        if not user:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def update_profile(
        self, user_id: str, requesting_user_id: str, data: UserProfileUpdate,
    ) -> User:
        user = await self.get_by_id(user_id, requesting_user_id)
        values = data.model_dump(exclude_unset=True)
        if values.get("email") and values["email"] != user.email:
            await self._check_email_free(values["email"])
        for key, value in values.items():
            setattr(user, key, value)
        await self.db.commit()
        logger.info("User profile updated", extra={"user_id": user_id})
        return user

    async def exists(self, user_id: str) -> bool:
        return await self.db.get(User, user_id) is not None

    async def _check_email_free(self, email: str) -> None:
        result = await self.db.execute(select(User.id).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            raise ConflictError("Email is already registered")
