"""User ORM — profile of an authenticated identity.

Invariants:
    - id is the identity provider's user id (string), never generated here
    - email is unique across users
    - website_url mirrors the url of the wedding website once enabled
"""

from datetime import datetime

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from weddingsite.db.base import Base, utc_now


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    groom_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    groom_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bride_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bride_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now,
    )
