"""Dashboard endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.dashboard import DashboardService
from loyalize.schemas import DashboardStatsResponse

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(db: AsyncSession = Depends(get_db_session)):
    stats = await DashboardService.with_session(db).stats()
    return DashboardStatsResponse.model_validate(stats)
