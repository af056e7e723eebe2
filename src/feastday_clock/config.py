"""
Application configuration via pydantic-settings.

All config is read from environment variables (or a local ``.env``) with
defaults for the Madison, MS kiosk. The liturgical API endpoints and client
credentials have no defaults: they must come from the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "index.html"


class Settings(BaseSettings):
    """Runtime settings for the page server."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "feastday-clock"
    app_env: str = Field(default="development", pattern=r"^(development|production|test)$")
    debug: bool = False

    # HTTP server
    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=3000, ge=1, le=65535)

    # Location (Madison, MS)
    lat: float = Field(default=32.4610, ge=-90, le=90)
    lon: float = Field(default=-90.1153, ge=-180, le=180)
    timezone: str = "America/Chicago"

    # Caching and upstream calls
    cache_ttl_seconds: float = Field(default=300.0, gt=0)
    http_timeout_seconds: float = Field(default=15.0, gt=0)

    # Page features
    show_forecast: bool = True
    show_fasting: bool = True
    template_path: Path = DEFAULT_TEMPLATE_PATH

    # Liturgical calendar API (OAuth2 client credentials)
    liturgical_token_url: str = ""
    liturgical_calendar_url: str = ""
    liturgical_day_url: str = ""  # format string with {item_id}
    liturgical_client_id: str = ""
    liturgical_client_secret: SecretStr = SecretStr("")

    @property
    def forecast_days(self) -> int:
        """Days requested from Open-Meteo: today plus seven when forecasting."""
        return 8 if self.show_forecast else 1


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
