"""Response models for the quote and weather integrations."""

from .base import DashboardModel


class QuoteRead(DashboardModel):
    text: str
    author: str


class WeatherRead(DashboardModel):
    temperature: int
    condition: str
    description: str
    location: str
    high: int
    low: int
    icon: str
