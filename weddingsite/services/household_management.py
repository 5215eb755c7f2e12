"""Household Management — create, reconcile and delete the household aggregate.

The household aggregate is the household row, its guests, each guest's invitation
per wedding event and tag assignments, and the household's gift per event.

Invariants:
    - Create: every guest is invited to every wedding event ("Not Invited" unless the
      form says otherwise) and the household gets one gift row per event
    - Update runs as one transaction: household fields → deleted guests → primary
      contact reset → guest upserts → invitation reconciliation → tag replacement → gifts
    - All validation happens before the first mutation
    - Guests, invitations and gifts never cross weddings

Design Decisions:
    - Mutations go through the ORM collections (delete-orphan cascade) instead of
      bulk statements so the in-session aggregate stays consistent with the rows
    - The aggregate is re-read after commit so responses carry generated ids
"""

import logging
import uuid

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.config import get_settings
from weddingsite.core.domain_types import AgeGroup, INVITED_STATUSES
from weddingsite.core.errors import InputValidationError, ResourceNotFoundError
from weddingsite.core.guest_party import (
    check_tag_limit, check_tags_known, plan_invitations, resolve_primary_contacts,
)
from weddingsite.models.event import Event
from weddingsite.models.gift import Gift
from weddingsite.models.guest import Guest
from weddingsite.models.guest_tag import GuestTagAssignment
from weddingsite.models.household import Household
from weddingsite.models.invitation import Invitation
from weddingsite.models.website import Website
from weddingsite.schemas.household import (
    GuestPartyMember, HouseholdCreate, HouseholdUpdate,
)
from weddingsite.services.guest_service import replace_guest_tags
from weddingsite.services.guest_tag_service import GuestTagService
from weddingsite.services.ownership import get_owned

logger = logging.getLogger(__name__)

_GUEST_FIELDS = {"first_name", "last_name", "email", "phone"}


class HouseholdManagementService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.max_tags = get_settings().max_tags_per_guest

    # ─── Create ──────────────────────────────────────────────────

    async def create_household_with_guests(
        self, wedding_id: uuid.UUID, data: HouseholdCreate,
    ) -> Household:
        events = await self._wedding_events(wedding_id)
        event_ids = [event.id for event in events]
        plans = [plan_invitations(event_ids, member.invites) for member in data.guest_party]
        await self._check_party_tags(wedding_id, data.guest_party)
        primaries = resolve_primary_contacts(
            [member.is_primary_contact for member in data.guest_party],
        )

        household = Household(
            wedding_id=wedding_id,
            guests=[],
            gifts=[
                Gift(event_id=event.id, event=event, thankyou=False)
                for event in events
            ],
            **data.household_values(),
        )
        for member, plan, is_primary in zip(data.guest_party, plans, primaries):
            household.guests.append(
                self._new_guest(wedding_id, member, plan, is_primary),
            )
        self.db.add(household)
        await self.db.commit()
        logger.info(
            f"Household created with {len(data.guest_party)} guests",
            extra={"wedding_id": wedding_id, "household_id": household.id},
        )
        return await self._reload(household.id)

    # ─── Update ──────────────────────────────────────────────────

    async def update_household_with_guests(
        self, wedding_id: uuid.UUID, household_id: uuid.UUID, data: HouseholdUpdate,
    ) -> Household:
        household = await get_owned(
            self.db, Household, household_id, wedding_id, "Household",
        )
        events = await self._wedding_events(wedding_id)
        event_by_id = {event.id: event for event in events}
        event_ids = list(event_by_id)

        deleted = set(data.deleted_guests)
        remaining = {
            guest.id: guest for guest in household.guests if guest.id not in deleted
        }
        for member in data.guest_party:
            if member.guest_id is not None and member.guest_id not in remaining:
                raise InputValidationError(
                    f"Guest {member.guest_id} is not part of this household",
                    field="guest_party",
                )
        plans = [plan_invitations(event_ids, member.invites) for member in data.guest_party]
        await self._check_party_tags(wedding_id, data.guest_party)
        for gift in data.gifts:
            if gift.event_id not in event_by_id:
                raise InputValidationError(
                    f"Event {gift.event_id} is not part of this wedding", field="gifts",
                )

        for key, value in data.household_values().items():
            setattr(household, key, value)

        for guest in list(household.guests):
            if guest.id in deleted:
                household.guests.remove(guest)

        if any(member.is_primary_contact is not None for member in data.guest_party):
            for guest in household.guests:
                guest.is_primary_contact = False

        for member, plan in zip(data.guest_party, plans):
            if member.guest_id is None:
                household.guests.append(self._new_guest(
                    wedding_id, member, plan, bool(member.is_primary_contact),
                ))
                continue
            guest = remaining[member.guest_id]
            self._apply_guest_fields(guest, member)
            self._reconcile_invitations(guest, wedding_id, member)
            if member.tag_ids is not None:
                replace_guest_tags(guest, member.tag_ids)

        gifts_by_event = {gift.event_id: gift for gift in household.gifts}
        for entry in data.gifts:
            gift = gifts_by_event.get(entry.event_id)
            if gift is None:
                household.gifts.append(Gift(
                    event_id=entry.event_id, event=event_by_id[entry.event_id],
                    description=entry.description, thankyou=entry.thankyou,
                ))
            else:
                gift.description = entry.description
                gift.thankyou = entry.thankyou

        await self.db.commit()
        logger.info(
            f"Household updated ({len(data.guest_party)} guests, "
            f"{len(deleted)} removed, {len(data.gifts)} gifts)",
            extra={"wedding_id": wedding_id, "household_id": household_id},
        )
        return await self._reload(household_id)

    # ─── Delete / Read ───────────────────────────────────────────

    async def delete_household(
        self, wedding_id: uuid.UUID, household_id: uuid.UUID,
    ) -> uuid.UUID:
        household = await get_owned(
            self.db, Household, household_id, wedding_id, "Household",
        )
        await self.db.delete(household)
        await self.db.commit()
        logger.info(
            "Household deleted",
            extra={"wedding_id": wedding_id, "household_id": household_id},
        )
        return household_id

    async def search_households(
        self, search_text: str, sub_url: str | None = None,
    ) -> list[Household]:
        """Public lookup of households by guest name for the RSVP flow."""
        search_text = (search_text or "").strip()
        if len(search_text) < 2:
            raise InputValidationError(
                "Search text must be at least 2 characters", field="search_text",
            )
        invited = select(Invitation.guest_id).where(
            Invitation.rsvp.in_([status.value for status in INVITED_STATUSES]),
        )
        matching = (
            select(Guest.household_id)
            .where(or_(
                Guest.first_name.icontains(search_text, autoescape=True),
                Guest.last_name.icontains(search_text, autoescape=True),
            ))
            .where(Guest.id.in_(invited))
        )
        if sub_url:
            matching = matching.where(
                Guest.wedding_id.in_(
                    select(Website.wedding_id).where(Website.sub_url == sub_url),
                ),
            )
        result = await self.db.execute(
            select(Household)
            .where(Household.id.in_(matching))
            .order_by(Household.created_at),
        )
        return list(result.scalars().all())

    async def get_wedding_households(self, wedding_id: uuid.UUID) -> list[Household]:
        result = await self.db.execute(
            select(Household)
            .where(Household.wedding_id == wedding_id)
            .order_by(Household.created_at),
        )
        return list(result.scalars().all())

    async def get_household(
        self, wedding_id: uuid.UUID, household_id: uuid.UUID,
    ) -> Household:
        return await get_owned(self.db, Household, household_id, wedding_id, "Household")

    # ─── Helpers ─────────────────────────────────────────────────

    async def _wedding_events(self, wedding_id: uuid.UUID) -> list[Event]:
        result = await self.db.execute(
            select(Event)
            .where(Event.wedding_id == wedding_id)
            .order_by(Event.created_at),
        )
        return list(result.scalars().all())

    async def _check_party_tags(
        self, wedding_id: uuid.UUID, party: list[GuestPartyMember],
    ) -> None:
        requested = []
        for member in party:
            check_tag_limit(member.tag_ids, self.max_tags)
            requested.extend(member.tag_ids or [])
        if requested:
            known = await GuestTagService(self.db).get_tag_ids(wedding_id)
            check_tags_known(requested, known)

    def _new_guest(
        self, wedding_id: uuid.UUID, member: GuestPartyMember,
        plan: dict, is_primary: bool,
    ) -> Guest:
        return Guest(
            wedding_id=wedding_id,
            first_name=member.first_name,
            last_name=member.last_name,
            email=member.email,
            phone=member.phone,
            is_primary_contact=is_primary,
            age_group=(member.age_group or AgeGroup.ADULT).value,
            invitations=[
                Invitation(event_id=event_id, wedding_id=wedding_id, rsvp=rsvp)
                for event_id, rsvp in plan.items()
            ],
            tag_assignments=[
                GuestTagAssignment(guest_tag_id=tag_id)
                for tag_id in dict.fromkeys(member.tag_ids or [])
            ],
        )

    @staticmethod
    def _apply_guest_fields(guest: Guest, member: GuestPartyMember) -> None:
        for key, value in member.model_dump(
            exclude_unset=True, include=_GUEST_FIELDS,
        ).items():
            setattr(guest, key, value)
        if member.age_group is not None:
            guest.age_group = member.age_group.value
        if member.is_primary_contact is not None:
            guest.is_primary_contact = member.is_primary_contact

    @staticmethod
    def _reconcile_invitations(
        guest: Guest, wedding_id: uuid.UUID, member: GuestPartyMember,
    ) -> None:
        by_event = {invitation.event_id: invitation for invitation in guest.invitations}
        for event_id, rsvp in member.invites.items():
            invitation = by_event.get(event_id)
            if invitation is None:
                guest.invitations.append(Invitation(
                    event_id=event_id, wedding_id=wedding_id, rsvp=rsvp.value,
                ))
            else:
                invitation.rsvp = rsvp.value

    async def _reload(self, household_id: uuid.UUID) -> Household:
        self.db.expire_all()
        result = await self.db.execute(
            select(Household).where(Household.id == household_id),
        )
        household = result.scalar_one_or_none()
        if household is None:
            raise ResourceNotFoundError("Household", str(household_id))
        return household
