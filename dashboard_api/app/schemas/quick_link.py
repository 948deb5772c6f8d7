"""Pydantic models for quick links shown on the dashboard."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DashboardModel, PartialUpdate


class QuickLinkCreate(DashboardModel):
    name: str = Field(..., min_length=1, examples=["Gmail"])
    url: str = Field(..., min_length=1, examples=["https://gmail.com"])
    icon: Optional[str] = None
    order: Optional[int] = None


class QuickLinkUpdate(PartialUpdate):
    name: Optional[str] = None
    url: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None


class QuickLinkRead(DashboardModel):
    id: str
    user_id: str
    name: str
    url: str
    icon: str
    order: int
    created_at: datetime
