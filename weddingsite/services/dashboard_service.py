"""Dashboard Service — the couple's overview in a single read.

Invariants:
    - Returns None when the user has no profile or no wedding
    - Event tallies count anything other than Invited / Attending / Declined as not_invited
    - Couple names come from the user profile, the countdown from the "Wedding Day" event
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.domain_types import WEDDING_DAY_EVENT
from weddingsite.core.wedding_calendar import describe_wedding_date
from weddingsite.models.user import User
from weddingsite.schemas.dashboard import (
    DashboardEvent, DashboardOverview, DashboardWebsite, DashboardWeddingData,
)
from weddingsite.schemas.household import HouseholdOut
from weddingsite.schemas.website import WebsiteResponse
from weddingsite.services.event_service import EventService
from weddingsite.services.household_management import HouseholdManagementService
from weddingsite.services.question_service import QuestionService
from weddingsite.services.website_service import WebsiteService
from weddingsite.services.wedding_service import WeddingService

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_overview(
        self, user_id: str | None, today: date | None = None,
    ) -> DashboardOverview | None:
        if not user_id:
            return None
        user = await self.db.get(User, user_id)
        wedding = await WeddingService(self.db).get_by_user_id(user_id)
        if not user or not wedding:
            return None

        questions = QuestionService(self.db)
        events = await EventService(self.db).get_wedding_events(wedding.id)
        event_stats = {
            event.id: event
            for event in await EventService(self.db).get_wedding_events_with_stats(wedding.id)
        }
        households = await HouseholdManagementService(self.db).get_wedding_households(
            wedding.id,
        )
        website = await WebsiteService(self.db).get_by_wedding_id(wedding.id)

        wedding_day = next(
            (event for event in events if event.name == WEDDING_DAY_EVENT), None,
        )
        calendar = describe_wedding_date(
            wedding_day.date if wedding_day else None, today or date.today(),
        )

        dashboard_website = None
        if website:
            dashboard_website = DashboardWebsite(
                **WebsiteResponse.model_validate(website).model_dump(
                    exclude={"general_questions"},
                ),
                general_questions=await questions.with_activity(website.general_questions),
            )

        return DashboardOverview(
            wedding_id=wedding.id,
            wedding_data=DashboardWeddingData(
                website=dashboard_website,
                groom_first_name=user.groom_first_name or wedding.groom_first_name,
                groom_last_name=user.groom_last_name or wedding.groom_last_name,
                bride_first_name=user.bride_first_name or wedding.bride_first_name,
                bride_last_name=user.bride_last_name or wedding.bride_last_name,
                **calendar,
            ),
            total_guests=sum(len(household.guests) for household in households),
            total_events=len(events),
            households=[HouseholdOut.model_validate(household) for household in households],
            events=[
                DashboardEvent(
                    **event_stats[event.id].model_dump(),
                    questions=await questions.with_activity(event.questions),
                )
                for event in events
            ],
        )
