"""
Daily summary endpoints for API v1.

There is at most one summary per day.  ``PUT`` writes the whole
summary for the day named in the body, replacing any previous one;
``PATCH`` adjusts individual counters of an existing summary.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.daily_summary import (
    DailySummaryCreate,
    DailySummaryRead,
    DailySummaryUpdate,
)
from dashboard_api.app.services import DashboardServices

from .deps import day_param, get_services


router = APIRouter()


@router.get("", response_model=DailySummaryRead)
async def get_summary(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> DailySummaryRead:
    """Return the summary for ``date`` (default today), or 404."""
    return await services.summaries.require(day)


@router.put("", response_model=DailySummaryRead)
async def put_summary(
    summary_in: DailySummaryCreate,
    services: DashboardServices = Depends(get_services),
) -> DailySummaryRead:
    return await services.summaries.upsert(summary_in)


@router.patch("", response_model=DailySummaryRead)
async def update_summary(
    summary_in: DailySummaryUpdate,
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> DailySummaryRead:
    summary = await services.summaries.update(summary_in, day)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Daily summary not found")
    return summary


@router.delete("", response_model=DeleteResult)
async def delete_summary(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.summaries.delete(day):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Daily summary not found")
    return DeleteResult()
