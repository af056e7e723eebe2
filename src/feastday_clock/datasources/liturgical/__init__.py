"""Liturgical calendar data source.

Fetches today's feast, fasting designation and scripture readings from an
OAuth2-protected liturgical calendar API.

Public API:
  - client: errors, fetch_access_token (client-credentials exchange)
  - calendar: CalendarDate, fetch_calendar_dates, find_calendar_date
  - day: fetch_liturgical_day, parse_liturgical_day
  - today: get_liturgical_day (all three steps for one date)
"""

from feastday_clock.datasources.liturgical.calendar import (
    CalendarDate,
    fetch_calendar_dates,
    find_calendar_date,
)
from feastday_clock.datasources.liturgical.client import (
    LiturgicalConfigError,
    LiturgicalDayNotFound,
    LiturgicalError,
    fetch_access_token,
)
from feastday_clock.datasources.liturgical.day import fetch_liturgical_day, parse_liturgical_day
from feastday_clock.datasources.liturgical.today import get_liturgical_day

__all__ = [
    "CalendarDate",
    "LiturgicalConfigError",
    "LiturgicalDayNotFound",
    "LiturgicalError",
    "fetch_access_token",
    "fetch_calendar_dates",
    "fetch_liturgical_day",
    "find_calendar_date",
    "get_liturgical_day",
    "parse_liturgical_day",
]
