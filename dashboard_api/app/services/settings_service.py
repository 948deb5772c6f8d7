"""
Service layer for per‑user dashboard settings.

Settings hold the user's display name, daily focus line, quick notes
and background image.  There is exactly one settings record per
user; ``upsert`` replaces it wholesale while ``update`` patches the
named fields only.
"""

from dashboard_api.app.schemas.settings import UserSettingsRead

from .base import SingletonService


class SettingsService(SingletonService[UserSettingsRead]):
    kind = "Settings"
    dated = False
