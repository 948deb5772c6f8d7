"""
Pydantic models for habits.

``streak`` and ``last_completed`` are computed by the caller (see
``HabitService.toggle``); the store persists whatever it is given.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DashboardModel, PartialUpdate


# Empty string means "not completed"; otherwise a YYYY-MM-DD date.
LAST_COMPLETED_PATTERN = r"^(\d{4}-\d{2}-\d{2})?$"


class HabitCreate(DashboardModel):
    name: str = Field(..., min_length=1, examples=["Meditate"])
    icon: Optional[str] = Field(None, examples=["🧘"])
    streak: Optional[int] = Field(None, ge=0)
    last_completed: Optional[str] = Field(None, pattern=LAST_COMPLETED_PATTERN)


class HabitUpdate(PartialUpdate):
    name: Optional[str] = None
    icon: Optional[str] = None
    streak: Optional[int] = Field(None, ge=0)
    last_completed: Optional[str] = Field(None, pattern=LAST_COMPLETED_PATTERN)


class HabitRead(DashboardModel):
    id: str
    user_id: str
    name: str
    icon: str
    streak: int
    last_completed: str
    created_at: datetime
