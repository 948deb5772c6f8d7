"""
Shared FastAPI dependencies for the v1 endpoints.
"""

from datetime import date as date_cls
from typing import Optional

from fastapi import Query, Request
from fastapi.exceptions import RequestValidationError

from dashboard_api.app.core.scoping import today
from dashboard_api.app.schemas.base import DATE_PATTERN
from dashboard_api.app.services import DashboardServices


def get_services(request: Request) -> DashboardServices:
    """Return the service façade attached to the running application."""
    return request.app.state.services


def day_param(
    date: Optional[str] = Query(
        None,
        pattern=DATE_PATTERN,
        description="Day in YYYY-MM-DD format. Defaults to today (UTC).",
    ),
) -> str:
    """Resolve the ``date`` query parameter, defaulting to today.

    The pattern only checks the shape, so calendar validity
    (``2024-02-30``) is checked here.
    """
    if date is None:
        return today()
    try:
        date_cls.fromisoformat(date)
    except ValueError:
        raise RequestValidationError(
            [{"type": "value_error", "loc": ("query", "date"), "msg": "Not a calendar date", "input": date}]
        )
    return date
