"""Weather fragments: current temperature, today's high/low, forecast row."""

from __future__ import annotations

from typing import TYPE_CHECKING

from feastday_clock.renderers import render_template

if TYPE_CHECKING:
    from feastday_clock.schemas import WeatherSnapshot

WEATHER_UNAVAILABLE = "Unable to load weather"


def build_weather_temp_html(weather: WeatherSnapshot) -> str:
    """Icon plus current temperature, e.g. ``⛅ 71°F``."""
    return render_template(
        "weather_temp.html.j2",
        icon=weather.icon,
        label=weather.label,
        temp=weather.current_temp_f,
    )


def build_high_low_html(weather: WeatherSnapshot) -> str:
    """Today's high and low, e.g. ``75° / 59°``."""
    return render_template("high_low.html.j2", high=weather.high_f, low=weather.low_f)


def build_forecast_html(weather: WeatherSnapshot) -> str:
    """One fragment per forecast day, in the order the API returned them."""
    if not weather.forecast:
        return ""
    return render_template("forecast.html.j2", days=weather.forecast)
