"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import (
    tasks,
    settings,
    schedule,
    habits,
    quick_links,
    daily_summary,
    daily_book,
    website_usage,
    ai_insights,
    integrations,
    users,
)

router = APIRouter()

router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
router.include_router(habits.router, prefix="/habits", tags=["habits"])
router.include_router(quick_links.router, prefix="/quick-links", tags=["quick-links"])
router.include_router(daily_summary.router, prefix="/daily-summary", tags=["daily-summary"])
router.include_router(daily_book.router, prefix="/daily-book", tags=["daily-book"])
router.include_router(website_usage.router, prefix="/website-usage", tags=["website-usage"])
router.include_router(ai_insights.router, prefix="/ai-insights", tags=["ai-insights"])
router.include_router(users.router, prefix="/users", tags=["users"])
# The integrations router defines "/quote" and "/weather" itself.
router.include_router(integrations.router, tags=["integrations"])
