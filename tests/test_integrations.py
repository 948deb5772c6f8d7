import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from dashboard_api.app.core.config import Settings
from dashboard_api.app.core.exceptions import UpstreamIntegrationError
from dashboard_api.app.core.store import DashboardStore
from dashboard_api.app.main import create_app
from dashboard_api.app.services.quote_service import FALLBACK_QUOTE, QuoteService
from dashboard_api.app.services.weather_service import WeatherService

WEATHER_PAYLOAD = {
    "name": "Lisbon",
    "main": {"temp": 21.6, "temp_max": 24.4, "temp_min": 17.2},
    "weather": [{"main": "Clouds", "description": "scattered clouds", "icon": "03d"}],
}


def _transport(status_code=200, payload=None, exc=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if exc is not None:
            raise exc
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


def _client(transport, api_key="test-key"):
    config = Settings(seed_demo_data=False, weather_api_key=api_key)
    return TestClient(create_app(store=DashboardStore(), config=config, http_transport=transport))


class TestQuote:
    def test_success(self):
        service = QuoteService(
            "https://quotes.test/random",
            transport=_transport(payload={"content": "Stay hungry.", "author": "Steve Jobs"}),
        )
        quote = asyncio.run(service.fetch())
        assert quote.text == "Stay hungry."
        assert quote.author == "Steve Jobs"

    def test_server_error_falls_back(self):
        service = QuoteService("https://quotes.test/random", transport=_transport(status_code=503))
        assert asyncio.run(service.fetch()) == FALLBACK_QUOTE

    def test_network_error_falls_back(self):
        service = QuoteService(
            "https://quotes.test/random", transport=_transport(exc=httpx.ConnectError("refused"))
        )
        assert asyncio.run(service.fetch()) == FALLBACK_QUOTE

    def test_bad_payload_falls_back(self):
        service = QuoteService("https://quotes.test/random", transport=_transport(payload={"quote": "?"}))
        assert asyncio.run(service.fetch()) == FALLBACK_QUOTE

    def test_endpoint_never_fails(self):
        with _client(_transport(exc=httpx.ConnectError("refused"))) as client:
            resp = client.get("/api/quote")
        assert resp.status_code == 200
        assert resp.json() == {
            "text": "The present moment is the only time over which we have dominion.",
            "author": "Thich Nhat Hanh",
        }


class TestWeather:
    def test_success(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            return httpx.Response(200, json=WEATHER_PAYLOAD)

        with _client(httpx.MockTransport(handler)) as client:
            resp = client.get("/api/weather", params={"lat": 38.7, "lon": -9.1})
        assert resp.status_code == 200
        assert resp.json() == {
            "temperature": 22,
            "condition": "Clouds",
            "description": "scattered clouds",
            "location": "Lisbon",
            "high": 24,
            "low": 17,
            "icon": "03d",
        }
        assert seen["units"] == "metric"
        assert seen["appid"] == "test-key"

    def test_missing_coordinates(self):
        with _client(_transport(payload=WEATHER_PAYLOAD)) as client:
            resp = client.get("/api/weather")
        assert resp.status_code == 502
        assert resp.json()["message"] == "Location coordinates required"

    def test_missing_key(self):
        with _client(_transport(payload=WEATHER_PAYLOAD), api_key="") as client:
            resp = client.get("/api/weather", params={"lat": 1, "lon": 2})
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Weather data unavailable"

    def test_upstream_failure(self):
        with _client(_transport(status_code=401, payload={"message": "bad key"})) as client:
            resp = client.get("/api/weather", params={"lat": 1, "lon": 2})
        assert resp.status_code == 502

    def test_malformed_payload(self):
        service = WeatherService(
            "https://weather.test", "k", transport=_transport(payload={"main": {}})
        )
        with pytest.raises(UpstreamIntegrationError):
            asyncio.run(service.fetch(1.0, 2.0))
