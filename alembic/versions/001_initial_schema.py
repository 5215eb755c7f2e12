"""Initial schema — users, weddings, websites, events, households, guests, RSVPs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]
    if updated:
        columns.append(
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
    return columns


def _wedding_fk() -> sa.Column:
    return sa.Column(
        "wedding_id", UUID(as_uuid=True),
        sa.ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False, index=True,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("website_url", sa.String(512), nullable=True),
        sa.Column("groom_first_name", sa.String(100), nullable=True),
        sa.Column("groom_last_name", sa.String(100), nullable=True),
        sa.Column("bride_first_name", sa.String(100), nullable=True),
        sa.Column("bride_last_name", sa.String(100), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "weddings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("groom_first_name", sa.String(100), nullable=False),
        sa.Column("groom_middle_name", sa.String(100), nullable=True),
        sa.Column("groom_last_name", sa.String(100), nullable=False),
        sa.Column("bride_first_name", sa.String(100), nullable=False),
        sa.Column("bride_middle_name", sa.String(100), nullable=True),
        sa.Column("bride_last_name", sa.String(100), nullable=False),
        sa.Column("enabled_add_ons", sa.JSON, nullable=False, server_default="[]"),
        *_timestamps(),
    )

    op.create_table(
        "user_weddings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id", sa.String(128),
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column(
            "wedding_id", UUID(as_uuid=True),
            sa.ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("role", sa.String(20), nullable=False, server_default="owner"),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(updated=False),
        sa.UniqueConstraint("user_id", "wedding_id", name="uq_user_weddings_user_wedding"),
    )

    op.create_table(
        "websites",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "wedding_id", UUID(as_uuid=True),
            sa.ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False, unique=True,
        ),
        sa.Column("url", sa.String(512), nullable=False),
        sa.Column("sub_url", sa.String(255), nullable=False, unique=True),
        sa.Column("groom_first_name", sa.String(100), nullable=False),
        sa.Column("groom_last_name", sa.String(100), nullable=False),
        sa.Column("bride_first_name", sa.String(100), nullable=False),
        sa.Column("bride_last_name", sa.String(100), nullable=False),
        sa.Column("is_password_enabled", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("is_rsvp_enabled", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("cover_photo_url", sa.String(1024), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "events",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _wedding_fk(),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("date", sa.Date, nullable=True),
        sa.Column("start_time", sa.String(20), nullable=True),
        sa.Column("end_time", sa.String(20), nullable=True),
        sa.Column("venue", sa.String(255), nullable=True),
        sa.Column("attire", sa.String(255), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("collect_rsvp", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
    )

    op.create_table(
        "households",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _wedding_fk(),
        sa.Column("address1", sa.String(255), nullable=True),
        sa.Column("address2", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "guests",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _wedding_fk(),
        sa.Column(
            "household_id", UUID(as_uuid=True),
            sa.ForeignKey("households.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("is_primary_contact", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("age_group", sa.String(10), nullable=False, server_default="ADULT"),
        *_timestamps(),
    )

    op.create_table(
        "invitations",
        sa.Column(
            "guest_id", sa.Integer,
            sa.ForeignKey("guests.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "event_id", UUID(as_uuid=True),
            sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True,
        ),
        _wedding_fk(),
        sa.Column("rsvp", sa.String(20), nullable=False, server_default="Not Invited"),
        sa.Column("invited_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "gifts",
        sa.Column(
            "household_id", UUID(as_uuid=True),
            sa.ForeignKey("households.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "event_id", UUID(as_uuid=True),
            sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("thankyou", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
    )

    op.create_table(
        "questions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "event_id", UUID(as_uuid=True),
            sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=True, index=True,
        ),
        sa.Column(
            "website_id", UUID(as_uuid=True),
            sa.ForeignKey("websites.id", ondelete="CASCADE"), nullable=True, index=True,
        ),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("type", sa.String(10), nullable=False, server_default="Text"),
        sa.Column("is_required", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
        sa.CheckConstraint(
            "(event_id IS NULL) <> (website_id IS NULL)", name="ck_questions_single_owner",
        ),
    )

    op.create_table(
        "options",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "question_id", UUID(as_uuid=True),
            sa.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("response_count", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )

    op.create_table(
        "answers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "question_id", UUID(as_uuid=True),
            sa.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column("guest_id", sa.Integer, nullable=True),
        sa.Column("household_id", UUID(as_uuid=True), nullable=True),
        sa.Column("guest_first_name", sa.String(100), nullable=True),
        sa.Column("guest_last_name", sa.String(100), nullable=True),
        sa.Column("response", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
    )

    op.create_table(
        "option_responses",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "question_id", UUID(as_uuid=True),
            sa.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column(
            "option_id", UUID(as_uuid=True),
            sa.ForeignKey("options.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("guest_id", sa.Integer, nullable=True),
        sa.Column("household_id", UUID(as_uuid=True), nullable=True),
        sa.Column("guest_first_name", sa.String(100), nullable=True),
        sa.Column("guest_last_name", sa.String(100), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "guest_tags",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _wedding_fk(),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("color", sa.String(7), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("wedding_id", "name", name="uq_guest_tags_wedding_name"),
    )

    op.create_table(
        "guest_tag_assignments",
        sa.Column(
            "guest_id", sa.Integer,
            sa.ForeignKey("guests.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "guest_tag_id", UUID(as_uuid=True),
            sa.ForeignKey("guest_tags.id", ondelete="CASCADE"), primary_key=True,
        ),
        *_timestamps(updated=False),
    )


def downgrade() -> None:
    for table in (
        "guest_tag_assignments", "guest_tags", "option_responses", "answers",
        "options", "questions", "gifts", "invitations", "guests", "households",
        "events", "websites", "user_weddings", "weddings", "users",
    ):
        op.drop_table(table)
