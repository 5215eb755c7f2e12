"""Gift Schemas — per-household, per-event gift tracking."""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class GiftInput(BaseModel):
    """Gift entry submitted with a household update."""
    event_id: uuid.UUID
    description: str | None = Field(None, max_length=2000)
    thankyou: bool = False


class GiftUpdate(BaseModel):
    household_id: uuid.UUID
    event_id: uuid.UUID
    description: str | None = Field(None, max_length=2000)
    thankyou: bool | None = None


class ThankYouRequest(BaseModel):
    household_id: uuid.UUID
    event_id: uuid.UUID


class GiftOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    household_id: uuid.UUID
    event_id: uuid.UUID
    event_name: str
    description: str | None = None
    thankyou: bool
