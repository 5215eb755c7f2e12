"""Event ORM — a wedding event guests are invited to (ceremony, reception, ...).

Invariants:
    - name is 1-50 chars
    - Deleting an event cascades to its invitations, gifts and questions (DB-level)
    - questions are ordered by creation
"""

import uuid
import datetime

from sqlalchemy import String, Text, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Event(Base):
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    start_time: Mapped[str | None] = mapped_column(String(20), nullable=True)
    end_time: Mapped[str | None] = mapped_column(String(20), nullable=True)
    venue: Mapped[str | None] = mapped_column(String(255), nullable=True)
    attire: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    collect_rsvp: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )

    questions: Mapped[list["Question"]] = relationship(
        "Question", order_by="Question.created_at",
        cascade="all, delete-orphan", passive_deletes=True, lazy="selectin",
    )
