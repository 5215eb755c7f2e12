"""Website Service — the couple's public wedding website.

Invariants:
    - One website per wedding (409 on a second enable); a wedding must exist first (412)
    - sub_url is unique across all websites; generated ones get a numeric suffix when taken
    - The website url is mirrored onto the owning user's profile
    - Password-protected sites only reveal wedding data to callers with the password

Design Decisions:
    - Passwords are stored as argon2 hashes and compared with passlib
"""

import logging
import uuid
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.config import get_settings
from weddingsite.core.domain_types import (
    DEFAULT_GENERAL_QUESTIONS, QuestionType, WEBSITE_ADD_ON, WEDDING_DAY_EVENT,
)
from weddingsite.core.errors import (
    ConflictError, ErrorContext, InputValidationError, PreconditionFailedError,
    ResourceNotFoundError, UnauthorizedError,
)
from weddingsite.core.site_url import (
    base_of_site_url, build_sub_url, join_site_url, next_available_sub_url,
)
from weddingsite.core.wedding_calendar import describe_wedding_date
from weddingsite.infrastructure.passwords import hash_password, verify_password
from weddingsite.models.event import Event
from weddingsite.models.question import Question
from weddingsite.models.user import User
from weddingsite.models.website import Website
from weddingsite.models.wedding import Wedding
from weddingsite.schemas.event import EventResponse
from weddingsite.schemas.website import (
    EventWithQuestions, PublicWebsiteDetail, PublicWebsiteResponse,
    WebsiteEnable, WebsiteUpdate, WeddingPageResponse,
)
from weddingsite.services.ownership import check_wedding
from weddingsite.services.question_service import QuestionService

logger = logging.getLogger(__name__)


class WebsiteService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def enable_website(
        self, wedding_id: uuid.UUID | None, user_id: str, data: WebsiteEnable,
    ) -> Website:
        wedding = await self.db.get(Wedding, wedding_id) if wedding_id else None
        if wedding is None:
            raise PreconditionFailedError("Create your wedding before enabling the website")
        if await self.get_by_wedding_id(wedding.id):
            raise ConflictError(
                "Website already exists for this wedding",
                ErrorContext(wedding_id=str(wedding.id), resource="Website"),
            )

        names = {
            "groom_first_name": data.groom_first_name or wedding.groom_first_name,
            "groom_last_name": data.groom_last_name or wedding.groom_last_name,
            "bride_first_name": data.bride_first_name or wedding.bride_first_name,
            "bride_last_name": data.bride_last_name or wedding.bride_last_name,
        }
        sub_url = await self._unique_sub_url(build_sub_url(
            names["groom_first_name"], names["groom_last_name"],
            names["bride_first_name"], names["bride_last_name"],
        ))
        url = join_site_url(data.base_path or get_settings().site_base_url, sub_url)
        website = Website(
            wedding_id=wedding.id,
            url=url,
            sub_url=sub_url,
            is_password_enabled=False,
            is_rsvp_enabled=True,
            general_questions=[
                Question(text=text, type=QuestionType.TEXT.value, is_required=False, options=[])
                for text in DEFAULT_GENERAL_QUESTIONS
            ],
            **names,
        )
        self.db.add(website)
        if WEBSITE_ADD_ON not in (wedding.enabled_add_ons or []):
            wedding.enabled_add_ons = [*(wedding.enabled_add_ons or []), WEBSITE_ADD_ON]
        await self._sync_user_url(user_id, url)
        await self.db.commit()
        logger.info(
            f"Website enabled at {url}",
            extra={"wedding_id": wedding.id, "user_id": user_id},
        )
        return website

    async def update_website(
        self, wedding_id: uuid.UUID, user_id: str, data: WebsiteUpdate,
    ) -> Website:
        website = await self._require_website(wedding_id)

        if data.sub_url and data.sub_url != website.sub_url:
            taken = await self.db.execute(
                select(Website.id)
                .where(Website.sub_url == data.sub_url)
                .where(Website.id != website.id),
            )
            if taken.scalar_one_or_none() is not None:
                raise ConflictError("This URL is already taken")
            website.sub_url = data.sub_url
            base = data.base_path or base_of_site_url(website.url)
            website.url = join_site_url(base, website.sub_url)
            await self._sync_user_url(user_id, website.url)
        elif data.base_path:
            website.url = join_site_url(data.base_path, website.sub_url)
            await self._sync_user_url(user_id, website.url)

        if data.password:
            website.password_hash = hash_password(data.password)
        if data.is_password_enabled is not None:
            if data.is_password_enabled and not website.password_hash:
                raise InputValidationError(
                    "A password is required to protect the website", field="password",
                )
            website.is_password_enabled = data.is_password_enabled

        await self.db.commit()
        logger.info("Website updated", extra={"wedding_id": wedding_id, "user_id": user_id})
        return website

    async def update_rsvp_enabled(
        self, wedding_id: uuid.UUID, website_id: uuid.UUID, is_rsvp_enabled: bool,
    ) -> Website:
        website = await self.db.get(Website, website_id)
        if not website:
            raise ResourceNotFoundError("Website", str(website_id))
        check_wedding(website.wedding_id, wedding_id, "Website")
        website.is_rsvp_enabled = is_rsvp_enabled
        await self.db.commit()
        return website

    async def update_cover_photo(
        self, wedding_id: uuid.UUID, cover_photo_url: str | None,
    ) -> Website:
        website = await self._require_website(wedding_id)
        website.cover_photo_url = cover_photo_url
        await self.db.commit()
        return website

    async def get_by_wedding_id(self, wedding_id: uuid.UUID | None) -> Website | None:
        if wedding_id is None:
            return None
        result = await self.db.execute(
            select(Website).where(Website.wedding_id == wedding_id),
        )
        return result.scalar_one_or_none()

    async def get_by_sub_url(self, sub_url: str | None) -> Website | None:
        if not sub_url:
            return None
        result = await self.db.execute(select(Website).where(Website.sub_url == sub_url))
        return result.scalar_one_or_none()

    async def verify_password(self, sub_url: str, password: str) -> bool:
        website = await self._require_public_website(sub_url)
        self._check_site_access(website, password)
        return True

    async def fetch_wedding_data(
        self, sub_url: str, password: str | None = None, today: date | None = None,
    ) -> WeddingPageResponse:
        """Everything the public wedding page needs, gated by the site password."""
        website = await self._require_public_website(sub_url)
        self._check_site_access(website, password)

        result = await self.db.execute(
            select(Event)
            .where(Event.wedding_id == website.wedding_id)
            .order_by(Event.created_at),
        )
        events = list(result.scalars().all())
        questions = QuestionService(self.db)
        wedding_day = next(
            (event for event in events if event.name == WEDDING_DAY_EVENT), None,
        )
        wedding_date = wedding_day.date if wedding_day else None
        calendar = describe_wedding_date(wedding_date, today or date.today())

        return WeddingPageResponse(
            groom_first_name=website.groom_first_name,
            groom_last_name=website.groom_last_name,
            bride_first_name=website.bride_first_name,
            bride_last_name=website.bride_last_name,
            date=wedding_date,
            website=PublicWebsiteDetail(
                **PublicWebsiteResponse.model_validate(website).model_dump(),
                general_questions=await questions.with_activity(
                    website.general_questions, include_recent=False,
                ),
            ),
            events=[
                EventWithQuestions(
                    **EventResponse.model_validate(event).model_dump(),
                    questions=await questions.with_activity(
                        event.questions, include_recent=False,
                    ),
                )
                for event in events
            ],
            **calendar,
        )

    async def _require_website(self, wedding_id: uuid.UUID) -> Website:
        website = await self.get_by_wedding_id(wedding_id)
        if not website:
            raise ResourceNotFoundError("Website", message="Website has not been enabled")
        return website

    async def _require_public_website(self, sub_url: str) -> Website:
        website = await self.get_by_sub_url(sub_url)
        if not website:
            raise ResourceNotFoundError("Website", message="This website does not exist.")
        return website

    @staticmethod
    def _check_site_access(website: Website, password: str | None) -> None:
        if website.is_password_enabled and not verify_password(
            password or "", website.password_hash,
        ):
            raise UnauthorizedError(
                "This website is password protected", code="PASSWORD_REQUIRED",
            )

    async def _unique_sub_url(self, candidate: str) -> str:
        result = await self.db.execute(
            select(Website.sub_url).where(Website.sub_url.like(f"{candidate}%")),
        )
        return next_available_sub_url(candidate, set(result.scalars().all()))

    async def _sync_user_url(self, user_id: str, url: str) -> None:
        user = await self.db.get(User, user_id)
        if user:
            user.website_url = url
