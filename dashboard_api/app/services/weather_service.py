"""
Current weather for the dashboard header.

Calls the OpenWeatherMap current‑weather endpoint once per request.
Unlike the quote integration, failures are surfaced to the caller as
``UpstreamIntegrationError`` so the widget can show that weather is
unavailable.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from dashboard_api.app.core.exceptions import UpstreamIntegrationError
from dashboard_api.app.schemas.integrations import WeatherRead


logger = logging.getLogger(__name__)


class WeatherService:
    """Fetches weather from OpenWeatherMap (metric units)."""

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, lat: Optional[float], lon: Optional[float]) -> WeatherRead:
        """Return current conditions at ``lat``/``lon``.

        Raises
        ------
        UpstreamIntegrationError
            If no API key is configured, coordinates are missing or the
            upstream call fails in any way.
        """
        if not self._api_key:
            raise UpstreamIntegrationError("Weather API key not configured")
        if lat is None or lon is None:
            raise UpstreamIntegrationError("Location coordinates required")

        params = {"lat": lat, "lon": lon, "appid": self._api_key, "units": "metric"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self._url, params=params)
                resp.raise_for_status()
                data = resp.json()

            main = data["main"]
            current = data["weather"][0]
            return WeatherRead(
                temperature=round(main["temp"]),
                condition=current["main"],
                description=current["description"],
                location=data.get("name", ""),
                high=round(main["temp_max"]),
                low=round(main["temp_min"]),
                icon=current["icon"],
            )
        except httpx.HTTPStatusError as exc:
            logger.error("Weather API returned %s", exc.response.status_code)
            raise UpstreamIntegrationError("Failed to fetch weather data") from exc
        except httpx.HTTPError as exc:
            logger.error("Weather API request failed: %s", exc)
            raise UpstreamIntegrationError("Failed to fetch weather data") from exc
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.error("Unexpected weather payload: %s", exc)
            raise UpstreamIntegrationError("Malformed weather data") from exc
