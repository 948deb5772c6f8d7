"""
Pydantic models for website usage records.

Each row is the time spent on one domain during one day.  Rows are
listed with the most time‑consuming site first.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DATE_PATTERN, DashboardModel, PartialUpdate


class WebsiteUsageCreate(DashboardModel):
    date: str = Field(..., pattern=DATE_PATTERN)
    domain: str = Field(..., min_length=1, examples=["github.com"])
    title: str = Field(..., examples=["GitHub"])
    time_spent_minutes: Optional[int] = Field(None, ge=0)
    visit_count: Optional[int] = Field(None, ge=0)
    # work, social, entertainment, education, ...
    category: Optional[str] = None


class WebsiteUsageUpdate(PartialUpdate):
    title: Optional[str] = None
    time_spent_minutes: Optional[int] = Field(None, ge=0)
    visit_count: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None


class WebsiteUsageRead(DashboardModel):
    id: str
    user_id: str
    date: str
    domain: str
    title: str
    time_spent_minutes: int
    visit_count: int
    category: str
    created_at: datetime
