"""RSVP Submission — records a guest party's RSVPs and answers from the public site.

Invariants:
    - The whole submission commits or nothing does
    - Every RSVP targets an existing (guest, event) invitation (404 otherwise)
    - A respondent holds at most one option per Option question; switching moves one
      count from the old option to the new one, counts never drop below zero
    - Text answers are upserted by (question, guest, household)
    - Weddings whose website has RSVP disabled reject submissions (412)
"""

import logging
import uuid

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.domain_types import QuestionType
from weddingsite.core.errors import (
    InputValidationError, PreconditionFailedError, ResourceNotFoundError,
)
from weddingsite.models.answer import Answer, OptionResponse
from weddingsite.models.event import Event
from weddingsite.models.invitation import Invitation
from weddingsite.models.question import Question
from weddingsite.models.website import Website
from weddingsite.schemas.rsvp import AnswerItem, RsvpSubmission

logger = logging.getLogger(__name__)


class RsvpSubmissionService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self._rsvp_open: dict[uuid.UUID, bool] = {}

    async def submit_rsvp(self, data: RsvpSubmission) -> dict:
        for item in data.rsvp_responses:
            invitation = await self.db.get(Invitation, (item.guest_id, item.event_id))
            if not invitation:
                raise ResourceNotFoundError(
                    "Invitation", f"{item.guest_id}/{item.event_id}",
                )
            await self._check_rsvp_open(invitation.wedding_id)
            invitation.rsvp = item.rsvp.value

        for answer in data.answers_to_questions:
            question = await self.db.get(Question, answer.question_id)
            if not question:
                raise ResourceNotFoundError("Question", str(answer.question_id))
            await self._check_rsvp_open(await self._question_wedding_id(question))
            if question.type != answer.question_type.value:
                raise InputValidationError(
                    f"Question {question.id} is a {question.type} question",
                    field="question_type",
                )
            if question.type == QuestionType.OPTION.value:
                await self._record_option(question, answer)
            else:
                await self._record_text(question, answer)

        await self.db.commit()
        logger.info(
            f"RSVP submitted: {len(data.rsvp_responses)} responses, "
            f"{len(data.answers_to_questions)} answers",
        )
        return {"success": True}

    async def _record_option(self, question: Question, answer: AnswerItem) -> None:
        try:
            option_id = uuid.UUID(answer.response)
        except ValueError:
            raise InputValidationError("Option answer must be an option id", field="response")
        options = {option.id: option for option in question.options}
        chosen = options.get(option_id)
        if chosen is None:
            raise InputValidationError(
                f"Option {option_id} does not belong to question {question.id}",
                field="response",
            )

        existing = None
        respondent = []
        if answer.guest_id is not None:
            respondent.append(OptionResponse.guest_id == answer.guest_id)
        if answer.household_id is not None:
            respondent.append(OptionResponse.household_id == answer.household_id)
        if respondent:
            result = await self.db.execute(
                select(OptionResponse)
                .where(OptionResponse.question_id == question.id)
                .where(or_(*respondent))
                .limit(1),
            )
            existing = result.scalar_one_or_none()

        if existing is None:
            self.db.add(OptionResponse(
                question_id=question.id, option_id=chosen.id,
                guest_id=answer.guest_id, household_id=answer.household_id,
                guest_first_name=answer.guest_first_name,
                guest_last_name=answer.guest_last_name,
            ))
            chosen.response_count += 1
        elif existing.option_id != chosen.id:
            previous = options.get(existing.option_id)
            if previous is not None:
                previous.response_count = max(0, previous.response_count - 1)
            existing.option_id = chosen.id
            chosen.response_count += 1

    async def _record_text(self, question: Question, answer: AnswerItem) -> None:
        stmt = select(Answer).where(Answer.question_id == question.id)
        stmt = stmt.where(
            Answer.guest_id.is_(None) if answer.guest_id is None
            else Answer.guest_id == answer.guest_id,
        )
        stmt = stmt.where(
            Answer.household_id.is_(None) if answer.household_id is None
            else Answer.household_id == answer.household_id,
        )
        existing = (await self.db.execute(stmt.limit(1))).scalar_one_or_none()
        if existing is None:
            self.db.add(Answer(
                question_id=question.id, guest_id=answer.guest_id,
                household_id=answer.household_id,
                guest_first_name=answer.guest_first_name,
                guest_last_name=answer.guest_last_name,
                response=answer.response,
            ))
        else:
            existing.response = answer.response
            if answer.guest_first_name is not None:
                existing.guest_first_name = answer.guest_first_name
            if answer.guest_last_name is not None:
                existing.guest_last_name = answer.guest_last_name

    async def _question_wedding_id(self, question: Question) -> uuid.UUID:
        if question.event_id is not None:
            stmt = select(Event.wedding_id).where(Event.id == question.event_id)
        else:
            stmt = select(Website.wedding_id).where(Website.id == question.website_id)
        return (await self.db.execute(stmt)).scalar_one()

    async def _check_rsvp_open(self, wedding_id: uuid.UUID) -> None:
        if wedding_id not in self._rsvp_open:
            result = await self.db.execute(
                select(Website.is_rsvp_enabled).where(Website.wedding_id == wedding_id),
            )
            enabled = result.scalar_one_or_none()
            self._rsvp_open[wedding_id] = enabled is not False
        if not self._rsvp_open[wedding_id]:
            raise PreconditionFailedError("RSVPs are closed for this wedding")
