"""Guest Tag Schemas — wedding-scoped guest labels.

Invariants:
    - name stripped, 1-20 chars
    - color is #RRGGBB or null
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class GuestTagCreate(BaseModel):
    name: str = Field(min_length=1, max_length=20)
    color: str | None = Field(None, pattern=_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("tag name cannot be empty or whitespace")
        return v


class GuestTagUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=20)
    color: str | None = Field(None, pattern=_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("tag name cannot be empty or whitespace")
        return v


class GuestTagOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    wedding_id: uuid.UUID
    name: str
    color: str | None = None
    created_at: datetime


class GuestTagWithCount(GuestTagOut):
    guest_count: int = 0
