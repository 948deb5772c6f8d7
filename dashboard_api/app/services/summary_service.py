"""
Services for per‑day singleton records: the productivity summary and
the book of the day.
"""

from dashboard_api.app.schemas.daily_book import DailyBookRead
from dashboard_api.app.schemas.daily_summary import DailySummaryRead

from .base import SingletonService


class DailySummaryService(SingletonService[DailySummaryRead]):
    kind = "Daily summary"
    dated = True


class DailyBookService(SingletonService[DailyBookRead]):
    kind = "Daily book"
    dated = True
