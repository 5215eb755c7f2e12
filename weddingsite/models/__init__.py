"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Wedding is the tenant root; couple-owned tables are scoped by wedding_id

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from weddingsite.models.user import User  # noqa: F401
from weddingsite.models.wedding import Wedding, UserWedding  # noqa: F401
from weddingsite.models.website import Website  # noqa: F401
from weddingsite.models.event import Event  # noqa: F401
from weddingsite.models.household import Household  # noqa: F401
from weddingsite.models.guest import Guest  # noqa: F401
from weddingsite.models.invitation import Invitation  # noqa: F401
from weddingsite.models.gift import Gift  # noqa: F401
from weddingsite.models.question import Question, Option  # noqa: F401
from weddingsite.models.answer import Answer, OptionResponse  # noqa: F401
from weddingsite.models.guest_tag import GuestTag, GuestTagAssignment  # noqa: F401
