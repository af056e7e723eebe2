"""Open-Meteo weather data source.

Fetches current conditions, today's high/low and an optional multi-day
forecast from Open-Meteo (free, no API key).

Public API:
  - forecast: fetch_forecast (raw API call), parse_snapshot (-> WeatherSnapshot)
  - client: API URL, requested variables
"""

from feastday_clock.datasources.weather.client import OPEN_METEO_API
from feastday_clock.datasources.weather.forecast import (
    fetch_forecast,
    parse_snapshot,
    round_temp,
)

__all__ = [
    "OPEN_METEO_API",
    "fetch_forecast",
    "parse_snapshot",
    "round_temp",
]
