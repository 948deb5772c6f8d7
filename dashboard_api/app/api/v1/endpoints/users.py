"""
User endpoints for API v1.

Without authentication the only user a client can see is the one all
requests act on behalf of.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.user import UserRead
from dashboard_api.app.services import DashboardServices

from .deps import get_services


router = APIRouter()


@router.get("/me", response_model=UserRead)
async def get_current_user(services: DashboardServices = Depends(get_services)) -> UserRead:
    user = await services.users.get_user(services.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
