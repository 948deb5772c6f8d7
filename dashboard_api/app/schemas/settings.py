"""
Pydantic models for per‑user dashboard settings.

Settings are a singleton per user: writing them replaces the single
slot instead of appending a new row.
"""

from datetime import datetime
from typing import Optional

from .base import DashboardModel, PartialUpdate


class UserSettingsCreate(DashboardModel):
    user_name: Optional[str] = None
    daily_focus: Optional[str] = None
    quick_notes: Optional[str] = None
    background_image: Optional[str] = None


class UserSettingsUpdate(UserSettingsCreate, PartialUpdate):
    """Partial update; same fields as create, all optional."""


class UserSettingsRead(DashboardModel):
    id: str
    user_id: str
    user_name: str
    daily_focus: str
    quick_notes: str
    background_image: str
    created_at: datetime
