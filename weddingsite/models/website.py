"""Website ORM — the public wedding website (one per wedding).

Invariants:
    - sub_url is unique across all websites and matches ^\\w+$
    - password_hash is an argon2 hash, never the plain password
    - general_questions are website-level questions ordered by creation
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Website(Base):
    __tablename__ = "websites"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    url: Mapped[str] = mapped_column(String(512), nullable=False)
    sub_url: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    groom_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    groom_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bride_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bride_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_password_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_rsvp_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    cover_photo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )

    general_questions: Mapped[list["Question"]] = relationship(
        "Question", order_by="Question.created_at",
        cascade="all, delete-orphan", passive_deletes=True, lazy="selectin",
    )
