"""
Coaching insight endpoints for API v1.

Insights are stored text, newest first.  Nothing on the server
generates them.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.ai_insight import AIInsightCreate, AIInsightRead, AIInsightUpdate
from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.services import DashboardServices

from .deps import day_param, get_services


router = APIRouter()


@router.get("", response_model=List[AIInsightRead])
async def list_insights(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> List[AIInsightRead]:
    return await services.insights.list(day)


@router.post("", response_model=AIInsightRead)
async def create_insight(
    insight_in: AIInsightCreate,
    services: DashboardServices = Depends(get_services),
) -> AIInsightRead:
    return await services.insights.create(insight_in)


@router.patch("/{insight_id}", response_model=AIInsightRead)
async def update_insight(
    insight_id: str,
    insight_in: AIInsightUpdate,
    services: DashboardServices = Depends(get_services),
) -> AIInsightRead:
    insight = await services.insights.update(insight_id, insight_in)
    if insight is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Insight not found")
    return insight


@router.delete("/{insight_id}", response_model=DeleteResult)
async def delete_insight(
    insight_id: str,
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.insights.delete(insight_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Insight not found")
    return DeleteResult()
