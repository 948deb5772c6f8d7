"""
Services for day‑scoped feeds: website usage and coaching insights.

Website usage is listed with the site that took the most time first;
insights are listed newest first.
"""

from dashboard_api.app.schemas.ai_insight import AIInsightRead
from dashboard_api.app.schemas.website_usage import WebsiteUsageRead

from .base import DatedEntityService


class WebsiteUsageService(DatedEntityService[WebsiteUsageRead]):
    kind = "Usage record"


class InsightService(DatedEntityService[AIInsightRead]):
    kind = "Insight"
