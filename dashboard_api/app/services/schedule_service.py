"""Service for the daily schedule widget."""

from dashboard_api.app.schemas.schedule import ScheduleEventRead

from .base import DatedEntityService


class ScheduleService(DatedEntityService[ScheduleEventRead]):
    """Schedule events of one day, earliest ``time`` first."""

    kind = "Event"
