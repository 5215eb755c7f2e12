"""Guest ORM — a person in a household.

Invariants:
    - id is an auto-incrementing integer (the only non-UUID key)
    - Owns one invitation per wedding event and its tag assignments
    - age_group is one of INFANT, CHILD, TEEN, ADULT
"""

import uuid
from datetime import datetime

from sqlalchemy import Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Guest(Base):
    __tablename__ = "guests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    household_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("households.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_primary_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    age_group: Mapped[str] = mapped_column(String(10), nullable=False, default="ADULT")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )

    invitations: Mapped[list["Invitation"]] = relationship(
        "Invitation", cascade="all, delete-orphan", passive_deletes=True, lazy="selectin",
    )
    tag_assignments: Mapped[list["GuestTagAssignment"]] = relationship(
        "GuestTagAssignment", cascade="all, delete-orphan", passive_deletes=True,
        lazy="selectin",
    )

    @property
    def tag_ids(self) -> list[uuid.UUID]:
        return [assignment.guest_tag_id for assignment in self.tag_assignments]
