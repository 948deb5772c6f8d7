"""Service for the quick links bar."""

from dashboard_api.app.schemas.quick_link import QuickLinkRead

from .base import EntityService


class QuickLinkService(EntityService[QuickLinkRead]):
    kind = "Link"
