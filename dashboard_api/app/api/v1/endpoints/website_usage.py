"""
Website usage endpoints for API v1.

Usage rows are listed per day with the biggest time sink first.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.website_usage import (
    WebsiteUsageCreate,
    WebsiteUsageRead,
    WebsiteUsageUpdate,
)
from dashboard_api.app.services import DashboardServices

from .deps import day_param, get_services


router = APIRouter()


@router.get("", response_model=List[WebsiteUsageRead])
async def list_usage(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> List[WebsiteUsageRead]:
    return await services.usage.list(day)


@router.post("", response_model=WebsiteUsageRead)
async def create_usage(
    usage_in: WebsiteUsageCreate,
    services: DashboardServices = Depends(get_services),
) -> WebsiteUsageRead:
    return await services.usage.create(usage_in)


@router.patch("/{usage_id}", response_model=WebsiteUsageRead)
async def update_usage(
    usage_id: str,
    usage_in: WebsiteUsageUpdate,
    services: DashboardServices = Depends(get_services),
) -> WebsiteUsageRead:
    usage = await services.usage.update(usage_id, usage_in)
    if usage is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usage record not found")
    return usage


@router.delete("/{usage_id}", response_model=DeleteResult)
async def delete_usage(
    usage_id: str,
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.usage.delete(usage_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usage record not found")
    return DeleteResult()
