"""
Task endpoints for API v1.

CRUD over the current user's to‑do list.  Tasks are returned ordered
by their ``order`` field.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate
from dashboard_api.app.services import DashboardServices

from .deps import get_services


router = APIRouter()


@router.get("", response_model=List[TaskRead])
async def list_tasks(services: DashboardServices = Depends(get_services)) -> List[TaskRead]:
    """Return all tasks of the current user."""
    return await services.tasks.list()


@router.post("", response_model=TaskRead)
async def create_task(
    task_in: TaskCreate,
    services: DashboardServices = Depends(get_services),
) -> TaskRead:
    """Create a task.  ``completed`` defaults to false and ``order`` to 0."""
    return await services.tasks.create(task_in)


@router.patch("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: str,
    task_in: TaskUpdate,
    services: DashboardServices = Depends(get_services),
) -> TaskRead:
    """Update the provided fields of a task."""
    task = await services.tasks.update(task_id, task_in)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.delete("/{task_id}", response_model=DeleteResult)
async def delete_task(
    task_id: str,
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    deleted = await services.tasks.delete(task_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return DeleteResult()
