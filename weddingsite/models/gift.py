"""Gift ORM — what a household gave for one event, keyed by (household, event).

Invariants:
    - One row per (household, event); created with thankyou=False
    - event is eager-joined so the event name is always readable
"""

import uuid
from datetime import datetime

from sqlalchemy import Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Gift(Base):
    __tablename__ = "gifts"

    household_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("households.id", ondelete="CASCADE"), primary_key=True,
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    thankyou: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )

    event: Mapped["Event"] = relationship("Event", lazy="joined", innerjoin=True)

    @property
    def event_name(self) -> str:
        return self.event.name
