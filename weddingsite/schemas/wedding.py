"""Wedding Schemas — onboarding and wedding profile payloads.

Invariants:
    - Couple first/last names are required, stripped, 1-100 chars
    - wedding_date / wedding_location only matter when has_wedding_details is true
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WeddingCreate(BaseModel):
    groom_first_name: str = Field(min_length=1, max_length=100)
    groom_middle_name: str | None = Field(None, max_length=100)
    groom_last_name: str = Field(min_length=1, max_length=100)
    bride_first_name: str = Field(min_length=1, max_length=100)
    bride_middle_name: str | None = Field(None, max_length=100)
    bride_last_name: str = Field(min_length=1, max_length=100)
    has_wedding_details: bool = False
    wedding_date: date | None = None
    wedding_location: str | None = Field(None, max_length=255)

    @field_validator(
        "groom_first_name", "groom_last_name", "bride_first_name", "bride_last_name",
    )
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("wedding_date")
    @classmethod
    def not_in_past(cls, v: date | None) -> date | None:
        if v is not None and v < date.today():
            raise ValueError("wedding date cannot be in the past")
        return v


class WeddingUpdate(BaseModel):
    groom_first_name: str | None = Field(None, min_length=1, max_length=100)
    groom_middle_name: str | None = Field(None, max_length=100)
    groom_last_name: str | None = Field(None, min_length=1, max_length=100)
    bride_first_name: str | None = Field(None, min_length=1, max_length=100)
    bride_middle_name: str | None = Field(None, max_length=100)
    bride_last_name: str | None = Field(None, min_length=1, max_length=100)
    enabled_add_ons: list[str] | None = None


class WeddingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    groom_first_name: str
    groom_middle_name: str | None = None
    groom_last_name: str
    bride_first_name: str
    bride_middle_name: str | None = None
    bride_last_name: str
    enabled_add_ons: list[str]
    created_at: datetime
