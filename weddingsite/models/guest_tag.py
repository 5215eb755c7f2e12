"""Guest Tag ORMs — wedding-scoped labels and their assignment to guests.

Invariants:
    - name is 1-20 chars, unique within a wedding
    - color is #RRGGBB or NULL
    - Deleting a tag deletes its assignments (DB-level)
"""

import uuid
from datetime import datetime

from sqlalchemy import Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class GuestTag(Base):
    __tablename__ = "guest_tags"
    __table_args__ = (
        UniqueConstraint("wedding_id", "name", name="uq_guest_tags_wedding_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(20), nullable=False)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )


class GuestTagAssignment(Base):
    __tablename__ = "guest_tag_assignments"

    guest_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), primary_key=True,
    )
    guest_tag_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("guest_tags.id", ondelete="CASCADE"), primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
