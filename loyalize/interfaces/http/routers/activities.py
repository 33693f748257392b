"""Customer activity feed endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.activities import InvalidActivityError
from loyalize.modules.activities.service import DEFAULT_FEED_LIMIT, ActivityService
from loyalize.modules.customers import CustomerNotFoundError
from loyalize.schemas import ActivityCreate, ActivityResponse

router = APIRouter()


@router.get("", response_model=List[ActivityResponse], summary="Most recent activity")
async def list_activities(
    limit: int = Query(DEFAULT_FEED_LIMIT, ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    activities = await ActivityService.with_session(db).list_recent(limit)
    return [ActivityResponse.model_validate(activity) for activity in activities]


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED, summary="Record activity")
async def create_activity(
    payload: ActivityCreate,
    db: AsyncSession = Depends(get_db_session),
):
    service = ActivityService.with_session(db)
    try:
        activity = await service.record_activity(
            customer_id=payload.customer_id,
            type=payload.type,
            amount=payload.amount,
            reward_used=payload.reward_used,
        )
    except InvalidActivityError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    await db.commit()
    return ActivityResponse.model_validate(activity)
