"""Loyalty tier endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.tiers import TierNotFoundError
from loyalize.modules.tiers.service import TierService
from loyalize.schemas import TierCreate, TierResponse, TierUpdate

router = APIRouter()


@router.get("", response_model=List[TierResponse])
async def list_tiers(db: AsyncSession = Depends(get_db_session)):
    tiers = await TierService.with_session(db).list_tiers()
    return [TierResponse.model_validate(tier) for tier in tiers]


@router.post("", response_model=TierResponse, status_code=status.HTTP_201_CREATED)
async def create_tier(payload: TierCreate, db: AsyncSession = Depends(get_db_session)):
    tier = await TierService.with_session(db).create_tier(**payload.model_dump())
    await db.commit()
    return TierResponse.model_validate(tier)


@router.patch("/{tier_id}", response_model=TierResponse)
async def update_tier(
    payload: TierUpdate,
    tier_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        tier = await TierService.with_session(db).update_tier(
            tier_id, payload.model_dump(exclude_unset=True, exclude_none=True)
        )
    except TierNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tier not found") from exc
    await db.commit()
    return TierResponse.model_validate(tier)
