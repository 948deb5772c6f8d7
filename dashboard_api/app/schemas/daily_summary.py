"""
Pydantic models for the per‑day productivity summary.

One summary exists per user and day.  Counters are non‑negative and
``productivity_score`` is a percentage.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DATE_PATTERN, DashboardModel, PartialUpdate


class DailySummaryUpdate(PartialUpdate):
    tasks_completed: Optional[int] = Field(None, ge=0)
    total_tasks: Optional[int] = Field(None, ge=0)
    focus_time_minutes: Optional[int] = Field(None, ge=0)
    habits_completed: Optional[int] = Field(None, ge=0)
    total_habits: Optional[int] = Field(None, ge=0)
    productivity_score: Optional[int] = Field(None, ge=0, le=100)


class DailySummaryCreate(DailySummaryUpdate):
    date: str = Field(..., pattern=DATE_PATTERN, examples=["2024-01-01"])


class DailySummaryRead(DashboardModel):
    id: str
    user_id: str
    date: str
    tasks_completed: int
    total_tasks: int
    focus_time_minutes: int
    habits_completed: int
    total_habits: int
    productivity_score: int
    created_at: datetime
