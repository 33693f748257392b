"""Guest feedback endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.customers import CustomerNotFoundError
from loyalize.modules.feedback.service import FeedbackService
from loyalize.schemas import FeedbackCreate, FeedbackResponse, FeedbackStatsResponse

router = APIRouter()


@router.get("", response_model=List[FeedbackResponse])
async def list_feedback(db: AsyncSession = Depends(get_db_session)):
    entries = await FeedbackService.with_session(db).list_feedback()
    return [FeedbackResponse.model_validate(entry) for entry in entries]


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(payload: FeedbackCreate, db: AsyncSession = Depends(get_db_session)):
    try:
        entry = await FeedbackService.with_session(db).create_feedback(**payload.model_dump())
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    await db.commit()
    return FeedbackResponse.model_validate(entry)


@router.get("/stats", response_model=FeedbackStatsResponse)
async def feedback_stats(db: AsyncSession = Depends(get_db_session)):
    stats = await FeedbackService.with_session(db).stats()
    return FeedbackStatsResponse.model_validate(stats)
