"""
Pydantic models for dashboard users.

There is no sign‑up flow; a single demo user is created at startup
and all requests act on its behalf.
"""

from datetime import datetime

from pydantic import Field

from .base import DashboardModel


class UserCreate(DashboardModel):
    name: str = Field(..., min_length=1, examples=["Alex"])
    email: str = Field(..., min_length=3, examples=["alex@example.com"])


class UserRead(DashboardModel):
    id: str
    name: str
    email: str
    created_at: datetime
