"""Domain Types — enumerations and seed constants shared across the codebase.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Enum values are the stored/serialized strings

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class RsvpStatus(str, Enum):
    """Invitation RSVP states — maps to the `rsvp` column of invitations."""
    PENDING = "Pending"
    NOT_INVITED = "Not Invited"
    INVITED = "Invited"
    ATTENDING = "Attending"
    DECLINED = "Declined"


# Statuses that make a guest findable on the public RSVP search
INVITED_STATUSES = (RsvpStatus.INVITED, RsvpStatus.ATTENDING, RsvpStatus.DECLINED)


class QuestionType(str, Enum):
    TEXT = "Text"
    OPTION = "Option"


class AgeGroup(str, Enum):
    INFANT = "INFANT"
    CHILD = "CHILD"
    TEEN = "TEEN"
    ADULT = "ADULT"


class WeddingRole(str, Enum):
    """Role of a user on a wedding — maps to user_weddings.role."""
    OWNER = "owner"
    EDITOR = "editor"
    VIEWER = "viewer"


# ─── Seed Data ───────────────────────────────────────────────────

WEDDING_DAY_EVENT = "Wedding Day"
WEBSITE_ADD_ON = "website"

DEFAULT_GUEST_TAGS: tuple[tuple[str, str], ...] = (
    ("Family", "#3b82f6"),
    ("MutualFriends", "#10b981"),
    ("Coworkers", "#8b5cf6"),
    ("Plus One", "#f59e0b"),
)

DEFAULT_GENERAL_QUESTIONS: tuple[str, ...] = (
    "Will you be bringing any children under the age of 10?",
    "Send a note to the couple?",
)
