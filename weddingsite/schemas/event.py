"""Event Schemas — event create/update payloads and responses.

Invariants:
    - name is stripped, 1-50 chars
    - date may be today but never in the past
"""

import uuid
import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    date: datetime.date | None = None
    start_time: str | None = Field(None, max_length=20)
    end_time: str | None = Field(None, max_length=20)
    venue: str | None = Field(None, max_length=255)
    attire: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=5000)
    collect_rsvp: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("event name cannot be empty or whitespace")
        return v

    @field_validator("date")
    @classmethod
    def not_in_past(cls, v: datetime.date | None) -> datetime.date | None:
        if v is not None and v < datetime.date.today():
            raise ValueError("event date cannot be in the past")
        return v


class EventUpdate(EventCreate):
    """Full replacement of an event's editable fields."""


class CollectRsvpUpdate(BaseModel):
    collect_rsvp: bool


class RsvpStats(BaseModel):
    attending: int = 0
    invited: int = 0
    declined: int = 0
    not_invited: int = 0


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    wedding_id: uuid.UUID
    name: str
    date: datetime.date | None = None
    start_time: str | None = None
    end_time: str | None = None
    venue: str | None = None
    attire: str | None = None
    description: str | None = None
    collect_rsvp: bool
    created_at: datetime.datetime


class EventWithStats(EventResponse):
    guest_responses: RsvpStats
