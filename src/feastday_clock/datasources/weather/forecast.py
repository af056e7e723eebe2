"""Current conditions and multi-day forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

import math
from datetime import date
from typing import TYPE_CHECKING, Any

from feastday_clock.datasources.weather.client import (
    CURRENT_VARS,
    DAILY_VARS,
    FORECAST_DAILY_VARS,
    OPEN_METEO_API,
    TEMPERATURE_UNIT,
)
from feastday_clock.renderers.weather_utils import lookup_condition
from feastday_clock.schemas import ForecastDay, WeatherSnapshot

if TYPE_CHECKING:
    import requests


def round_temp(value: float) -> int:
    """Round to the nearest whole degree, halves going up (58.5 -> 59, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def fetch_forecast(
    session: requests.Session,
    lat: float,
    lon: float,
    *,
    timezone: str = "America/Chicago",
    forecast_days: int = 1,
) -> dict[str, Any]:
    """
    Fetch current conditions and daily highs/lows from Open-Meteo.

    Args:
        session: HTTP session to issue the request with.
        lat: Latitude.
        lon: Longitude.
        timezone: IANA timezone the daily values are aggregated in.
        forecast_days: 1 for today only, more to include a forecast.

    Returns:
        Raw API response dict with ``current`` and ``daily`` keys.
    """
    params: dict[str, str | int | float | list[str]] = {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_VARS),
        "daily": ",".join(FORECAST_DAILY_VARS if forecast_days > 1 else DAILY_VARS),
        "temperature_unit": TEMPERATURE_UNIT,
        "timezone": timezone,
        "forecast_days": forecast_days,
    }

    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def parse_snapshot(payload: dict[str, Any], *, include_forecast: bool = False) -> WeatherSnapshot:
    """Build a WeatherSnapshot from an Open-Meteo response.

    Today's high/low come from index 0 of the daily arrays. With
    ``include_forecast`` every later index becomes a ForecastDay, in the
    order the API returned them.

    Raises:
        KeyError, IndexError, TypeError: if the response is missing fields.
    """
    current = payload["current"]
    daily = payload["daily"]
    condition = lookup_condition(int(current["weather_code"]))

    forecast: list[ForecastDay] = []
    if include_forecast:
        times = daily["time"]
        highs = daily["temperature_2m_max"]
        lows = daily["temperature_2m_min"]
        codes = daily["weather_code"]
        for i in range(1, len(times)):
            day_condition = lookup_condition(int(codes[i]))
            forecast.append(
                ForecastDay(
                    date=date.fromisoformat(times[i]),
                    high_f=round_temp(highs[i]),
                    low_f=round_temp(lows[i]),
                    icon=day_condition.icon,
                    label=day_condition.label,
                )
            )

    return WeatherSnapshot(
        current_temp_f=round_temp(current["temperature_2m"]),
        icon=condition.icon,
        label=condition.label,
        high_f=round_temp(daily["temperature_2m_max"][0]),
        low_f=round_temp(daily["temperature_2m_min"][0]),
        forecast=tuple(forecast),
    )
