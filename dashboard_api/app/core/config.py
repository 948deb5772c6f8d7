"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
dashboard starts with no configuration at all; only the weather
integration needs an API key to return real data.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Daily Dashboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # There is no authentication; every request acts on behalf of this
    # user.
    default_user_id: str = os.getenv("DEFAULT_USER_ID", "default-user")

    # Populate the store with sample rows on startup so the dashboard is
    # not empty on first load.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")

    quote_api_url: str = os.getenv(
        "QUOTE_API_URL",
        "https://api.quotable.io/random?minLength=50&maxLength=150&tags=wisdom,motivational,inspirational",
    )
    weather_api_url: str = os.getenv(
        "WEATHER_API_URL", "https://api.openweathermap.org/data/2.5/weather"
    )
    weather_api_key: str = os.getenv("OPENWEATHER_API_KEY", "") or os.getenv("WEATHER_API_KEY", "")

    # Timeout in seconds for outbound HTTP calls (quote and weather).
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
