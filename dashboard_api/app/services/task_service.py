"""Service for the to‑do list."""

from dashboard_api.app.schemas.task import TaskRead

from .base import EntityService


class TaskService(EntityService[TaskRead]):
    """Tasks of the current user, listed by ``order``."""

    kind = "Task"
