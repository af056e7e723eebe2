"""Weather condition lookup.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

from typing import NamedTuple


class WeatherCondition(NamedTuple):
    """Display icon and human-readable label for a weather code."""

    icon: str
    label: str


# WMO Weather Interpretation Codes (https://open-meteo.com/en/docs)
WMO_CONDITIONS: dict[int, WeatherCondition] = {
    0: WeatherCondition("☀️", "Clear sky"),
    1: WeatherCondition("\U0001f324️", "Mainly clear"),
    2: WeatherCondition("⛅", "Partly cloudy"),
    3: WeatherCondition("☁️", "Overcast"),
    45: WeatherCondition("\U0001f32b️", "Foggy"),
    48: WeatherCondition("\U0001f32b️", "Foggy"),
    51: WeatherCondition("\U0001f326️", "Light drizzle"),
    53: WeatherCondition("\U0001f326️", "Drizzle"),
    55: WeatherCondition("\U0001f327️", "Heavy drizzle"),
    61: WeatherCondition("\U0001f327️", "Light rain"),
    63: WeatherCondition("\U0001f327️", "Rain"),
    65: WeatherCondition("\U0001f327️", "Heavy rain"),
    71: WeatherCondition("\U0001f328️", "Light snow"),
    73: WeatherCondition("\U0001f328️", "Snow"),
    75: WeatherCondition("\U0001f328️", "Heavy snow"),
    77: WeatherCondition("\U0001f328️", "Snow"),
    80: WeatherCondition("\U0001f326️", "Light rain showers"),
    81: WeatherCondition("\U0001f327️", "Rain showers"),
    82: WeatherCondition("\U0001f327️", "Heavy rain showers"),
    85: WeatherCondition("\U0001f328️", "Snow showers"),
    86: WeatherCondition("\U0001f328️", "Heavy snow showers"),
    95: WeatherCondition("⛈️", "Thunderstorm"),
    96: WeatherCondition("⛈️", "Thunderstorm with hail"),
    99: WeatherCondition("⛈️", "Thunderstorm with heavy hail"),
}

#: Used for any code missing from the table.
DEFAULT_CONDITION = WeatherCondition("\U0001f324️", "Partly cloudy")


def lookup_condition(code: int) -> WeatherCondition:
    """Convert a WMO weather code to its icon and label."""
    return WMO_CONDITIONS.get(code, DEFAULT_CONDITION)
