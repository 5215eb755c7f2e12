"""Website Schemas — enabling, configuring and reading the public wedding website.

Invariants:
    - sub_url matches ^\\w+$
    - password_hash is never serialized
"""

import uuid
import datetime

from pydantic import BaseModel, ConfigDict, Field

from weddingsite.schemas.event import EventResponse
from weddingsite.schemas.question import PublicQuestion, QuestionOut


class WebsiteEnable(BaseModel):
    """Names default to the wedding couple when omitted."""
    base_path: str | None = Field(None, max_length=255)
    groom_first_name: str | None = Field(None, max_length=100)
    groom_last_name: str | None = Field(None, max_length=100)
    bride_first_name: str | None = Field(None, max_length=100)
    bride_last_name: str | None = Field(None, max_length=100)


class WebsiteUpdate(BaseModel):
    is_password_enabled: bool | None = None
    password: str | None = Field(None, min_length=4, max_length=128)
    base_path: str | None = Field(None, max_length=255)
    sub_url: str | None = Field(None, min_length=1, max_length=255, pattern=r"^\w+$")


class RsvpEnabledUpdate(BaseModel):
    is_rsvp_enabled: bool


class CoverPhotoUpdate(BaseModel):
    cover_photo_url: str | None = Field(None, max_length=1024)


class SitePasswordSubmit(BaseModel):
    password: str = Field(min_length=1, max_length=128)


class WebsiteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    wedding_id: uuid.UUID
    url: str
    sub_url: str
    groom_first_name: str
    groom_last_name: str
    bride_first_name: str
    bride_last_name: str
    is_password_enabled: bool
    is_rsvp_enabled: bool
    cover_photo_url: str | None = None
    general_questions: list[QuestionOut] = []
    created_at: datetime.datetime


class PublicWebsiteResponse(BaseModel):
    """What an anonymous visitor may see before unlocking the site."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    sub_url: str
    groom_first_name: str
    groom_last_name: str
    bride_first_name: str
    bride_last_name: str
    is_password_enabled: bool
    is_rsvp_enabled: bool
    cover_photo_url: str | None = None


class FormattedDate(BaseModel):
    standard_format: str
    number_format: str


class PublicWebsiteDetail(PublicWebsiteResponse):
    general_questions: list[PublicQuestion] = []


class EventWithQuestions(EventResponse):
    questions: list[PublicQuestion] = []


class WeddingPageResponse(BaseModel):
    """Everything the public wedding page renders."""
    groom_first_name: str
    groom_last_name: str
    bride_first_name: str
    bride_last_name: str
    wedding_date: FormattedDate | None = None
    date: datetime.date | None = None
    days_remaining: int
    website: PublicWebsiteDetail
    events: list[EventWithQuestions] = []
