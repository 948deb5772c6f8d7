"""
Pydantic models for schedule events.

Events are scoped to a user and a calendar day (``YYYY-MM-DD``) and
listed by their ``HH:MM`` time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DATE_PATTERN, TIME_PATTERN, DashboardModel, PartialUpdate


class ScheduleEventCreate(DashboardModel):
    title: str = Field(..., min_length=1, examples=["Team meeting"])
    time: str = Field(..., pattern=TIME_PATTERN, examples=["10:00"])
    date: str = Field(..., pattern=DATE_PATTERN, examples=["2024-01-01"])
    completed: Optional[bool] = None


class ScheduleEventUpdate(PartialUpdate):
    """Partial update for a schedule event.

    Moving an event to another day is done by updating ``date``.
    """

    title: Optional[str] = None
    time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    completed: Optional[bool] = None


class ScheduleEventRead(DashboardModel):
    id: str
    user_id: str
    title: str
    time: str
    completed: bool
    date: str
    created_at: datetime
