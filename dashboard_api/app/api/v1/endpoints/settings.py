"""
Settings endpoints for API v1.

The current user has a single settings record holding the display
name, daily focus, quick notes and background image.  ``PATCH``
changes individual fields; ``POST`` replaces the whole record.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.settings import (
    UserSettingsCreate,
    UserSettingsRead,
    UserSettingsUpdate,
)
from dashboard_api.app.services import DashboardServices

from .deps import get_services


router = APIRouter()


@router.get("", response_model=UserSettingsRead)
async def get_settings(services: DashboardServices = Depends(get_services)) -> UserSettingsRead:
    """Return the settings of the current user, or 404 if none exist yet."""
    return await services.settings.require()


@router.post("", response_model=UserSettingsRead)
async def replace_settings(
    settings_in: UserSettingsCreate,
    services: DashboardServices = Depends(get_services),
) -> UserSettingsRead:
    """Create or replace the settings record.  Omitted fields take defaults."""
    return await services.settings.upsert(settings_in)


@router.patch("", response_model=UserSettingsRead)
async def update_settings(
    settings_in: UserSettingsUpdate,
    services: DashboardServices = Depends(get_services),
) -> UserSettingsRead:
    settings = await services.settings.update(settings_in)
    if settings is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Settings not found")
    return settings
