"""Question Routes — RSVP form questions for events and the website."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_wedding_id
from weddingsite.core.errors import InputValidationError
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.question import QuestionDetail, QuestionOut, QuestionUpsert
from weddingsite.services.question_service import QuestionService

router = APIRouter(prefix="/api/v1/questions", tags=["questions"])


@router.get("", response_model=list[QuestionOut])
async def list_questions(
    event_id: uuid.UUID | None = Query(None),
    website_id: uuid.UUID | None = Query(None),
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    service = QuestionService(db)
    if event_id is not None:
        return await service.get_by_event_id(event_id, wedding_id)
    if website_id is not None:
        return await service.get_by_website_id(website_id, wedding_id)
    raise InputValidationError("event_id or website_id is required", field="event_id")


@router.put("", response_model=QuestionOut)
async def upsert_question(
    body: QuestionUpsert,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    """Create (no id) or update a question together with its options."""
    return await QuestionService(db).upsert_question(wedding_id, body)


@router.get("/{question_id}", response_model=QuestionDetail)
async def get_question(
    question_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    return await QuestionService(db).get_by_id_with_options(question_id, wedding_id)


@router.delete("/{question_id}")
async def delete_question(
    question_id: uuid.UUID,
    wedding_id: uuid.UUID = Depends(get_wedding_id),
    db: AsyncSession = Depends(get_db),
):
    deleted = await QuestionService(db).delete_question(wedding_id, question_id)
    return {"id": str(deleted)}
