"""Guest Schemas — guest edits and guest responses."""

import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from weddingsite.core.domain_types import AgeGroup
from weddingsite.schemas.invitation import InvitationOut


class GuestUpdate(BaseModel):
    """Partial guest update; tag_ids (when given) replaces the guest's tags."""
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    age_group: AgeGroup | None = None
    tag_ids: list[uuid.UUID] | None = Field(None, max_length=10)


class GuestBulkDelete(BaseModel):
    guest_ids: list[int] = Field(min_length=1)


class GuestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    household_id: uuid.UUID
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    is_primary_contact: bool
    age_group: str
    invitations: list[InvitationOut] = []
    tag_ids: list[uuid.UUID] = []
