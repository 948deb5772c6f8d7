"""
Façade bundling every dashboard service.

One ``DashboardServices`` instance is built per application from an
explicitly constructed store and attached to ``app.state``; routers
obtain it through the ``get_services`` dependency.
"""

from __future__ import annotations

from typing import Optional

import httpx

from dashboard_api.app.core.config import Settings, settings as default_settings
from dashboard_api.app.core.store import DashboardStore

from .habit_service import HabitService
from .quick_link_service import QuickLinkService
from .quote_service import QuoteService
from .schedule_service import ScheduleService
from .settings_service import SettingsService
from .summary_service import DailyBookService, DailySummaryService
from .task_service import TaskService
from .usage_service import InsightService, WebsiteUsageService
from .user_service import UserService
from .weather_service import WeatherService


class DashboardServices:
    """All services for a single user over a single store."""

    def __init__(
        self,
        store: DashboardStore,
        user_id: str,
        config: Optional[Settings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config = config or default_settings
        self.store = store
        self.user_id = user_id

        self.users = UserService(store.users)
        self.tasks = TaskService(store.tasks, user_id)
        self.settings = SettingsService(store.settings, user_id)
        self.schedule = ScheduleService(store.schedule_events, user_id)
        self.habits = HabitService(store.habits, user_id)
        self.quick_links = QuickLinkService(store.quick_links, user_id)
        self.summaries = DailySummaryService(store.daily_summaries, user_id)
        self.books = DailyBookService(store.daily_books, user_id)
        self.usage = WebsiteUsageService(store.website_usage, user_id)
        self.insights = InsightService(store.ai_insights, user_id)

        self.quotes = QuoteService(config.quote_api_url, config.http_timeout, http_transport)
        self.weather = WeatherService(
            config.weather_api_url, config.weather_api_key, config.http_timeout, http_transport
        )
