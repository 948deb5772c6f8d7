"""
Pydantic models for to‑do tasks.

Tasks belong to a user and are displayed ordered by the integer
``order`` field.  ``completed`` toggles freely in both directions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DashboardModel, PartialUpdate


class TaskCreate(DashboardModel):
    """Schema for creating a task.  Omitted fields take store defaults."""

    text: str = Field(..., min_length=1, examples=["Buy milk"])
    completed: Optional[bool] = None
    order: Optional[int] = Field(None, examples=[0])


class TaskUpdate(PartialUpdate):
    """Schema for updating a task.

    All fields are optional; only provided fields will be updated.
    """

    text: Optional[str] = None
    completed: Optional[bool] = None
    order: Optional[int] = None


class TaskRead(DashboardModel):
    id: str
    user_id: str
    text: str
    completed: bool
    order: int
    created_at: datetime
