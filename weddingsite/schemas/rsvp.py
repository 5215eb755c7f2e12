"""RSVP Submission Schemas — what a guest submits from the public website.

Invariants:
    - Text answers carry free text in `response`
    - Option answers carry the chosen option's id in `response`
    - guest_id / household_id are optional (anonymous general questions)
"""

import uuid

from pydantic import BaseModel, Field

from weddingsite.core.domain_types import QuestionType, RsvpStatus


class RsvpResponseItem(BaseModel):
    guest_id: int
    event_id: uuid.UUID
    rsvp: RsvpStatus


class AnswerItem(BaseModel):
    question_id: uuid.UUID
    question_type: QuestionType
    response: str = Field(max_length=5000)
    guest_id: int | None = None
    household_id: uuid.UUID | None = None
    guest_first_name: str | None = Field(None, max_length=100)
    guest_last_name: str | None = Field(None, max_length=100)


class RsvpSubmission(BaseModel):
    rsvp_responses: list[RsvpResponseItem] = []
    answers_to_questions: list[AnswerItem] = []
