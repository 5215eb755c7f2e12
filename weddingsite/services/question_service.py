"""Question Service — RSVP form questions owned by events or by the website.

Invariants:
    - A question's owner (event or website) belongs to the caller's wedding
    - deleted_options are removed before the submitted options are applied
    - Options with an id are updated, options without one are created with
      response_count=0; an Option question ends with at least 2 options
    - Text questions carry no options
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.domain_types import QuestionType
from weddingsite.core.errors import InputValidationError, ResourceNotFoundError
from weddingsite.models.answer import Answer, OptionResponse
from weddingsite.models.event import Event
from weddingsite.models.question import Option, Question
from weddingsite.models.website import Website
from weddingsite.schemas.question import (
    PublicQuestion, QuestionDetail, QuestionOut, QuestionUpsert, RecentAnswer,
)
from weddingsite.services.ownership import check_wedding

logger = logging.getLogger(__name__)


class QuestionService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def upsert_question(self, wedding_id: uuid.UUID, data: QuestionUpsert) -> Question:
        await self._check_owner(wedding_id, data.event_id, data.website_id)
        if data.id is None:
            question = Question(
                event_id=data.event_id,
                website_id=data.website_id,
                text=data.text,
                type=data.type.value,
                is_required=data.is_required,
                options=[
                    Option(text=option.text, description=option.description, response_count=0)
                    for option in data.options
                ] if data.type == QuestionType.OPTION else [],
            )
            self.db.add(question)
        else:
            question = await self.get_by_id(data.id)
            await self._check_owner(wedding_id, question.event_id, question.website_id)
            question.event_id = data.event_id
            question.website_id = data.website_id
            question.text = data.text
            question.type = data.type.value
            question.is_required = data.is_required
            self._apply_options(question, data)

        await self.db.commit()
        logger.info(
            f"Question saved ({question.type})", extra={"wedding_id": wedding_id},
        )
        return question

    async def delete_question(self, wedding_id: uuid.UUID, question_id: uuid.UUID) -> uuid.UUID:
        question = await self.get_by_id(question_id)
        await self._check_owner(wedding_id, question.event_id, question.website_id)
        await self.db.delete(question)
        await self.db.commit()
        logger.info(f"Question deleted: {question_id}", extra={"wedding_id": wedding_id})
        return question_id

    async def get_by_id(self, question_id: uuid.UUID) -> Question:
        question = await self.db.get(Question, question_id)
        if not question:
            raise ResourceNotFoundError("Question", str(question_id))
        return question

    async def get_by_id_with_options(
        self, question_id: uuid.UUID, wedding_id: uuid.UUID,
    ) -> QuestionDetail:
        question = await self.get_by_id(question_id)
        await self._check_owner(wedding_id, question.event_id, question.website_id)
        return (await self.with_activity([question]))[0]

    async def get_by_event_id(self, event_id: uuid.UUID, wedding_id: uuid.UUID) -> list[Question]:
        await self._check_owner(wedding_id, event_id, None)
        result = await self.db.execute(
            select(Question)
            .where(Question.event_id == event_id)
            .order_by(Question.created_at),
        )
        return list(result.scalars().all())

    async def get_by_website_id(self, website_id: uuid.UUID, wedding_id: uuid.UUID) -> list[Question]:
        await self._check_owner(wedding_id, None, website_id)
        result = await self.db.execute(
            select(Question)
            .where(Question.website_id == website_id)
            .order_by(Question.created_at),
        )
        return list(result.scalars().all())

    async def with_activity(
        self, questions: Sequence[Question], include_recent: bool = True,
    ) -> list[PublicQuestion]:
        """Attach answer counts and, for the couple, the most recent text answer.

        Option choices live in OptionResponse rather than Answer, so both are
        counted. The public site passes include_recent=False: answer text and
        respondent names stay with the couple.
        """
        ids = [question.id for question in questions]
        if not ids:
            return []
        counts: dict[uuid.UUID, int] = {}
        for model in (Answer, OptionResponse):
            result = await self.db.execute(
                select(model.question_id, func.count())
                .where(model.question_id.in_(ids))
                .group_by(model.question_id),
            )
            for question_id, count in result.all():
                counts[question_id] = counts.get(question_id, 0) + count

        if not include_recent:
            return [
                PublicQuestion(
                    **QuestionOut.model_validate(question).model_dump(),
                    answer_count=counts.get(question.id, 0),
                )
                for question in questions
            ]

        recent: dict[uuid.UUID, Answer] = {}
        result = await self.db.execute(
            select(Answer)
            .where(Answer.question_id.in_(ids))
            .order_by(Answer.created_at.desc()),
        )
        for answer in result.scalars().all():
            recent.setdefault(answer.question_id, answer)

        return [
            QuestionDetail(
                **QuestionOut.model_validate(question).model_dump(),
                answer_count=counts.get(question.id, 0),
                recent_answer=RecentAnswer.model_validate(recent[question.id])
                if question.id in recent else None,
            )
            for question in questions
        ]

    def _apply_options(self, question: Question, data: QuestionUpsert) -> None:
        deleted = set(data.deleted_options)
        for option in list(question.options):
            if option.id in deleted:
                question.options.remove(option)

        if data.type == QuestionType.TEXT:
            question.options.clear()
            return

        existing = {option.id: option for option in question.options}
        for submitted in data.options:
            if submitted.id is None:
                question.options.append(Option(
                    text=submitted.text, description=submitted.description,
                    response_count=0,
                ))
                continue
            option = existing.get(submitted.id)
            if option is None:
                raise InputValidationError(
                    f"Option {submitted.id} does not belong to this question",
                    field="options",
                )
            option.text = submitted.text
            option.description = submitted.description

        if len(question.options) < 2:
            raise InputValidationError(
                "Option questions need at least 2 options", field="options",
            )

    async def _check_owner(
        self, wedding_id: uuid.UUID,
        event_id: uuid.UUID | None, website_id: uuid.UUID | None,
    ) -> None:
        if (event_id is None) == (website_id is None):
            raise InputValidationError(
                "Question must belong to either an event or a website", field="event_id",
            )
        if event_id is not None:
            model, key, resource = Event, event_id, "Event"
        else:
            model, key, resource = Website, website_id, "Website"
        result = await self.db.execute(select(model.wedding_id).where(model.id == key))
        owner = result.scalar_one_or_none()
        if owner is None:
            raise ResourceNotFoundError(resource, str(key))
        check_wedding(owner, wedding_id, resource)
