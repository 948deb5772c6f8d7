"""
Pydantic models for coaching insights.

Insights are plain pre‑written strings attached to a day; nothing
here generates them.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import DATE_PATTERN, DashboardModel, PartialUpdate


Severity = Literal["info", "warning", "critical"]


class AIInsightCreate(DashboardModel):
    date: str = Field(..., pattern=DATE_PATTERN)
    insight: str = Field(..., min_length=1)
    # productivity, focus, habits, time_management
    category: Optional[str] = Field(None, examples=["focus"])
    severity: Optional[Severity] = None
    actionable: Optional[bool] = None


class AIInsightUpdate(PartialUpdate):
    insight: Optional[str] = None
    category: Optional[str] = None
    severity: Optional[Severity] = None
    actionable: Optional[bool] = None


class AIInsightRead(DashboardModel):
    id: str
    user_id: str
    date: str
    insight: str
    category: str
    severity: Severity
    actionable: bool
    created_at: datetime
