"""Question Schemas — RSVP form questions and their options.

Invariants:
    - A question belongs to exactly one of event_id / website_id
    - Option questions carry at least 2 options, each with non-empty text
    - Text questions ignore options
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from weddingsite.core.domain_types import QuestionType


class OptionInput(BaseModel):
    id: uuid.UUID | None = None
    text: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=1000)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("option text cannot be empty")
        return v


class QuestionUpsert(BaseModel):
    """Create (no id) or update (id) a question with its options."""
    id: uuid.UUID | None = None
    event_id: uuid.UUID | None = None
    website_id: uuid.UUID | None = None
    text: str = Field(min_length=1, max_length=2000)
    type: QuestionType
    is_required: bool = False
    options: list[OptionInput] = []
    deleted_options: list[uuid.UUID] = []

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("question text cannot be empty")
        return v

    @model_validator(mode="after")
    def check_owner_and_options(self):
        if (self.event_id is None) == (self.website_id is None):
            raise ValueError("question must belong to either an event or a website")
        if self.type == QuestionType.OPTION and len(self.options) < 2:
            raise ValueError("option questions need at least 2 options")
        return self


class OptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    question_id: uuid.UUID
    text: str
    description: str | None = None
    response_count: int


class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    event_id: uuid.UUID | None = None
    website_id: uuid.UUID | None = None
    text: str
    type: str
    is_required: bool
    options: list[OptionOut] = []
    created_at: datetime


class RecentAnswer(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    response: str
    guest_first_name: str | None = None
    guest_last_name: str | None = None
    created_at: datetime


class PublicQuestion(QuestionOut):
    """Question as the public site shows it: counts, never answer text."""
    answer_count: int = 0


class QuestionDetail(PublicQuestion):
    """Question with response activity (dashboard, question detail)."""
    recent_answer: RecentAnswer | None = None
