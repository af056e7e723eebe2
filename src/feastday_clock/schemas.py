"""
Domain models for the feast-day clock.

Pydantic models for data from the two upstream APIs. Datasources normalize
API responses to these; renderers only ever see these types.
"""

from __future__ import annotations

from datetime import date as Date  # noqa: N812

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Weather
# =============================================================================


class ForecastDay(BaseModel):
    """Single day of the multi-day forecast.

    ``date`` is the civil date as reported by Open-Meteo for the configured
    timezone; it is never converted through the server's local timezone.
    """

    model_config = ConfigDict(frozen=True)

    date: Date
    high_f: int
    low_f: int
    icon: str
    label: str


class WeatherSnapshot(BaseModel):
    """Current conditions plus today's high/low and an optional forecast."""

    model_config = ConfigDict(frozen=True)

    current_temp_f: int
    icon: str
    label: str
    high_f: int
    low_f: int
    forecast: tuple[ForecastDay, ...] = ()


# =============================================================================
# Liturgical calendar
# =============================================================================


class Reading(BaseModel):
    """A scripture reading: title (citation) and full text."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    full_text: str = ""


class LiturgicalDay(BaseModel):
    """Feast and fasting details for one calendar day.

    Every text field defaults to an empty string; upstream nulls never reach
    the renderers.
    """

    model_config = ConfigDict(frozen=True)

    feast_title: str = ""
    fasting: str = ""
    fast_designation: str = ""
    feast_description: str = ""
    readings: tuple[Reading, ...] = Field(default=(), max_length=3)

    @property
    def fasting_note(self) -> str:
        """Short fasting annotation for the title line, or empty."""
        return self.fast_designation or self.fasting
