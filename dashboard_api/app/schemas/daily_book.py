"""Pydantic models for the book of the day."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DATE_PATTERN, DashboardModel, PartialUpdate


class DailyBookCreate(DashboardModel):
    date: str = Field(..., pattern=DATE_PATTERN)
    title: str = Field(..., min_length=1, examples=["Atomic Habits"])
    author: str = Field(..., examples=["James Clear"])
    summary: str
    key_takeaway: str
    genre: str
    cover_url: Optional[str] = None


class DailyBookUpdate(PartialUpdate):
    nullable_fields = frozenset({"cover_url"})

    title: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    key_takeaway: Optional[str] = None
    genre: Optional[str] = None
    cover_url: Optional[str] = None


class DailyBookRead(DashboardModel):
    id: str
    user_id: str
    date: str
    title: str
    author: str
    summary: str
    key_takeaway: str
    genre: str
    cover_url: Optional[str] = None
    created_at: datetime
