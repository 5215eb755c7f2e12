"""Household Schemas — the household + guest party aggregate payloads.

Invariants:
    - HouseholdCreate.guest_party has at least one guest
    - invites maps event id → RSVP status; unlisted events become "Not Invited"
    - tag_ids holds at most 10 tags per guest
    - On update only household fields present in the request change (exclude_unset)

Design Decisions:
    - One GuestPartyMember shape for create and update: guest_id present means
      "existing guest", absent means "new guest"
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from weddingsite.core.domain_types import AgeGroup, RsvpStatus
from weddingsite.schemas.gift import GiftInput, GiftOut
from weddingsite.schemas.guest import GuestOut

HOUSEHOLD_FIELDS = frozenset({
    "address1", "address2", "city", "state", "zip_code", "country",
    "phone", "email", "notes",
})


class GuestPartyMember(BaseModel):
    guest_id: int | None = None
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    is_primary_contact: bool | None = None
    age_group: AgeGroup | None = None
    invites: dict[uuid.UUID, RsvpStatus] = {}
    tag_ids: list[uuid.UUID] | None = Field(None, max_length=10)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("guest name cannot be empty or whitespace")
        return v


class HouseholdFields(BaseModel):
    address1: str | None = Field(None, max_length=255)
    address2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=50)
    email: EmailStr | None = None
    notes: str | None = Field(None, max_length=5000)

    def household_values(self) -> dict:
        return self.model_dump(exclude_unset=True, include=set(HOUSEHOLD_FIELDS))


class HouseholdCreate(HouseholdFields):
    guest_party: list[GuestPartyMember] = Field(min_length=1)


class HouseholdUpdate(HouseholdFields):
    guest_party: list[GuestPartyMember] = []
    deleted_guests: list[int] = []
    gifts: list[GiftInput] = []


class HouseholdOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    wedding_id: uuid.UUID
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None
    created_at: datetime
    guests: list[GuestOut] = []
    gifts: list[GiftOut] = []


class HouseholdSearchResult(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    guests: list[GuestOut] = []
