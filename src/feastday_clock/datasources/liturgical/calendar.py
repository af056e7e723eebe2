"""Calendar-dates listing: which item id describes which day."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from feastday_clock.datasources.liturgical.client import LiturgicalDayNotFound, bearer_headers

if TYPE_CHECKING:
    from datetime import date

    import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarDate:
    """One entry of the calendar listing."""

    year: int
    month: int
    day: int
    item_id: str

    def matches(self, day: date) -> bool:
        return (self.year, self.month, self.day) == (day.year, day.month, day.day)


def _parse_calendar_date(raw: dict[str, Any]) -> CalendarDate:
    return CalendarDate(
        year=int(raw["year"]),
        month=int(raw["month"]),
        day=int(raw["day"]),
        item_id=str(raw["itemId"]),
    )


def fetch_calendar_dates(
    session: requests.Session,
    calendar_url: str,
    token: str,
) -> list[CalendarDate]:
    """Fetch the list of calendar-day descriptors.

    Raises:
        requests.HTTPError: on a non-2xx response.
        KeyError, ValueError, TypeError: if an entry is malformed.
    """
    resp = session.get(calendar_url, headers=bearer_headers(token))
    resp.raise_for_status()
    return [_parse_calendar_date(raw) for raw in resp.json()]


def find_calendar_date(dates: list[CalendarDate], day: date) -> CalendarDate:
    """Return the listing entry for ``day``.

    Raises:
        LiturgicalDayNotFound: if no entry has the same year, month and day.
    """
    for entry in dates:
        if entry.matches(day):
            return entry

    logger.warning("No liturgical calendar entry for %s", day.isoformat())
    msg = f"No liturgical calendar entry for {day.isoformat()}"
    raise LiturgicalDayNotFound(msg)
