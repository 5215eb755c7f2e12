"""Wedding ORM — the tenant root, plus the user ↔ wedding link.

Invariants:
    - Every couple-owned table carries wedding_id with ON DELETE CASCADE
    - A user has at most one primary wedding (is_primary); the owner link is created with the wedding
    - enabled_add_ons is a JSON list of add-on names (e.g. "website"); reassign, never mutate in place

Design Decisions:
    - No ORM collections on Wedding: aggregates (households, events) are loaded by
      query, deletion relies on DB-level cascades
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Boolean, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from weddingsite.db.base import Base, utc_now


class Wedding(Base):
    __tablename__ = "weddings"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    groom_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    groom_middle_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    groom_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bride_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bride_middle_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bride_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    enabled_add_ons: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )


class UserWedding(Base):
    """Membership of a user in a wedding."""
    __tablename__ = "user_weddings"
    __table_args__ = (
        UniqueConstraint("user_id", "wedding_id", name="uq_user_weddings_user_wedding"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[str] = mapped_column(
        String(128), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="owner")
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
