"""
Service for habit tracking.

Besides plain CRUD this service owns the streak rule the dashboard
applies when a habit is ticked or unticked for a day.  The store does
not know about days; it simply keeps the ``streak`` and
``last_completed`` values computed here or sent by the client.
"""

from __future__ import annotations

import logging
from datetime import date as date_cls, timedelta
from typing import Optional

from dashboard_api.app.schemas.habit import HabitRead

from .base import EntityService


logger = logging.getLogger(__name__)


def previous_day(day: str) -> str:
    """Return the ISO date before ``day`` (``YYYY-MM-DD``)."""
    return (date_cls.fromisoformat(day) - timedelta(days=1)).isoformat()


def toggled_fields(habit: HabitRead, today: str) -> dict:
    """Compute the fields that tick or untick ``habit`` for ``today``.

    Unticking a habit completed today clears ``last_completed`` and
    takes one day off the streak (never below zero).  Ticking it
    extends the streak when the last completion was yesterday and
    restarts it at 1 otherwise.
    """
    if habit.last_completed == today:
        return {"last_completed": "", "streak": max(0, habit.streak - 1)}
    if habit.last_completed and habit.last_completed == previous_day(today):
        streak = habit.streak + 1
    else:
        streak = 1
    return {"last_completed": today, "streak": streak}


class HabitService(EntityService[HabitRead]):
    """Habits of the current user, oldest first."""

    kind = "Habit"

    async def toggle(self, habit_id: str, today: str) -> Optional[HabitRead]:
        """Tick or untick a habit for ``today``; ``None`` if it does not exist."""
        habit = self.collection.get(habit_id)
        if habit is None:
            logger.warning("Cannot toggle habit %s: not found", habit_id)
            return None
        changes = toggled_fields(habit, today)
        logger.info("Habit %s toggled for %s, streak %s", habit_id, today, changes["streak"])
        return self.collection.update(habit_id, changes)
