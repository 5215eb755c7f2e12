"""Invitation Schemas — RSVP records per (guest, event)."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from weddingsite.core.domain_types import RsvpStatus


class InvitationCreate(BaseModel):
    guest_id: int
    event_id: uuid.UUID
    rsvp: RsvpStatus = RsvpStatus.NOT_INVITED


class InvitationUpdate(BaseModel):
    guest_id: int
    event_id: uuid.UUID
    rsvp: RsvpStatus


class InvitationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    guest_id: int
    event_id: uuid.UUID
    rsvp: str
    invited_at: datetime
