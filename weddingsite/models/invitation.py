"""Invitation ORM — a guest's RSVP for one event, keyed by (guest, event)."""

import uuid
from datetime import datetime

from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Invitation(Base):
    __tablename__ = "invitations"

    guest_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), primary_key=True,
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True,
    )
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    rsvp: Mapped[str] = mapped_column(String(20), nullable=False, default="Not Invited")
    invited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )
