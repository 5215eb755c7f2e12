"""Dashboard Schemas — the couple's overview screen in one payload."""

import uuid

from pydantic import BaseModel

from weddingsite.schemas.event import EventWithStats
from weddingsite.schemas.household import HouseholdOut
from weddingsite.schemas.question import QuestionDetail
from weddingsite.schemas.website import FormattedDate, WebsiteResponse


class DashboardWebsite(WebsiteResponse):
    general_questions: list[QuestionDetail] = []


class DashboardWeddingData(BaseModel):
    website: DashboardWebsite | None = None
    groom_first_name: str | None = None
    groom_last_name: str | None = None
    bride_first_name: str | None = None
    bride_last_name: str | None = None
    wedding_date: FormattedDate | None = None
    days_remaining: int


class DashboardEvent(EventWithStats):
    questions: list[QuestionDetail] = []


class DashboardOverview(BaseModel):
    wedding_id: uuid.UUID
    wedding_data: DashboardWeddingData
    total_guests: int
    total_events: int
    households: list[HouseholdOut] = []
    events: list[DashboardEvent] = []
