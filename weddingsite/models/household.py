"""Household ORM — aggregate root for a party of guests sharing an address.

Invariants:
    - Owns its guests and its gifts (one gift row per wedding event)
    - Deleting a household deletes guests, their invitations and tag assignments, and gifts

Design Decisions:
    - selectin collections: the aggregate is always read whole (guests + gifts)
    - ORM cascade plus ON DELETE CASCADE: bulk deletes and ORM deletes behave the same
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Household(Base):
    __tablename__ = "households"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )

    guests: Mapped[list["Guest"]] = relationship(
        "Guest", order_by="Guest.id",
        cascade="all, delete-orphan", passive_deletes=True, lazy="selectin",
    )
    gifts: Mapped[list["Gift"]] = relationship(
        "Gift", cascade="all, delete-orphan", passive_deletes=True, lazy="selectin",
    )
