"""
Habit endpoints for API v1.

Besides CRUD, ``POST /habits/{id}/toggle`` ticks or unticks a habit
for a day and recomputes its streak on the server.  Clients that
compute streaks themselves can keep sending ``streak`` and
``lastCompleted`` through ``PATCH``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.habit import HabitCreate, HabitRead, HabitUpdate
from dashboard_api.app.services import DashboardServices

from .deps import day_param, get_services


router = APIRouter()


@router.get("", response_model=List[HabitRead])
async def list_habits(services: DashboardServices = Depends(get_services)) -> List[HabitRead]:
    return await services.habits.list()


@router.post("", response_model=HabitRead)
async def create_habit(
    habit_in: HabitCreate,
    services: DashboardServices = Depends(get_services),
) -> HabitRead:
    """Create a habit.  ``streak`` starts at 0 unless given."""
    return await services.habits.create(habit_in)


@router.patch("/{habit_id}", response_model=HabitRead)
async def update_habit(
    habit_id: str,
    habit_in: HabitUpdate,
    services: DashboardServices = Depends(get_services),
) -> HabitRead:
    habit = await services.habits.update(habit_id, habit_in)
    if habit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Habit not found")
    return habit


@router.post("/{habit_id}/toggle", response_model=HabitRead)
async def toggle_habit(
    habit_id: str,
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> HabitRead:
    """Tick the habit for ``date`` (default today), or untick it if already ticked."""
    habit = await services.habits.toggle(habit_id, day)
    if habit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Habit not found")
    return habit


@router.delete("/{habit_id}", response_model=DeleteResult)
async def delete_habit(
    habit_id: str,
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.habits.delete(habit_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Habit not found")
    return DeleteResult()
