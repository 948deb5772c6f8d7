"""Quick link endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.quick_link import QuickLinkCreate, QuickLinkRead, QuickLinkUpdate
from dashboard_api.app.services import DashboardServices

from .deps import get_services


router = APIRouter()


@router.get("", response_model=List[QuickLinkRead])
async def list_links(services: DashboardServices = Depends(get_services)) -> List[QuickLinkRead]:
    return await services.quick_links.list()


@router.post("", response_model=QuickLinkRead)
async def create_link(
    link_in: QuickLinkCreate,
    services: DashboardServices = Depends(get_services),
) -> QuickLinkRead:
    return await services.quick_links.create(link_in)


@router.patch("/{link_id}", response_model=QuickLinkRead)
async def update_link(
    link_id: str,
    link_in: QuickLinkUpdate,
    services: DashboardServices = Depends(get_services),
) -> QuickLinkRead:
    link = await services.quick_links.update(link_id, link_in)
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Link not found")
    return link


@router.delete("/{link_id}", response_model=DeleteResult)
async def delete_link(
    link_id: str,
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.quick_links.delete(link_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Link not found")
    return DeleteResult()
