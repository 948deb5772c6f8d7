"""
Quote and weather endpoints for API v1.

``GET /quote`` always succeeds, falling back to a fixed quote.
``GET /weather`` answers 502 when the weather provider cannot be
reached or no API key is configured.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from dashboard_api.app.schemas.integrations import QuoteRead, WeatherRead
from dashboard_api.app.services import DashboardServices

from .deps import get_services


router = APIRouter()


@router.get("/quote", response_model=QuoteRead)
async def get_quote(services: DashboardServices = Depends(get_services)) -> QuoteRead:
    return await services.quotes.fetch()


@router.get("/weather", response_model=WeatherRead)
async def get_weather(
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
    services: DashboardServices = Depends(get_services),
) -> WeatherRead:
    return await services.weather.fetch(lat, lon)
