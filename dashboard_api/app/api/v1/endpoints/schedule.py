"""
Schedule endpoints for API v1.

Events are listed one day at a time (``?date=YYYY-MM-DD``, default
today) and sorted by their ``HH:MM`` time.  A day with no events
yields an empty list.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.schedule import (
    ScheduleEventCreate,
    ScheduleEventRead,
    ScheduleEventUpdate,
)
from dashboard_api.app.services import DashboardServices

from .deps import day_param, get_services


router = APIRouter()


@router.get("", response_model=List[ScheduleEventRead])
async def list_events(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> List[ScheduleEventRead]:
    return await services.schedule.list(day)


@router.post("", response_model=ScheduleEventRead)
async def create_event(
    event_in: ScheduleEventCreate,
    services: DashboardServices = Depends(get_services),
) -> ScheduleEventRead:
    return await services.schedule.create(event_in)


@router.patch("/{event_id}", response_model=ScheduleEventRead)
async def update_event(
    event_id: str,
    event_in: ScheduleEventUpdate,
    services: DashboardServices = Depends(get_services),
) -> ScheduleEventRead:
    event = await services.schedule.update(event_id, event_in)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.delete("/{event_id}", response_model=DeleteResult)
async def delete_event(
    event_id: str,
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.schedule.delete(event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return DeleteResult()
