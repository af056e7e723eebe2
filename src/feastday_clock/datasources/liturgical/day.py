"""Liturgical day detail: feast, fasting and readings for one item id."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from feastday_clock.datasources.liturgical.client import bearer_headers
from feastday_clock.schemas import LiturgicalDay, Reading

if TYPE_CHECKING:
    import requests

READING_SLOTS = (1, 2, 3)


def _text(record: dict[str, Any], key: str) -> str:
    """Field as a string; absent and null both become empty."""
    value = record.get(key)
    return "" if value is None else str(value)


def fetch_liturgical_day(
    session: requests.Session,
    day_url: str,
    token: str,
    item_id: str,
) -> dict[str, Any]:
    """
    Fetch the detail record for one calendar item.

    Args:
        session: HTTP session to issue the request with.
        day_url: Endpoint URL template containing ``{item_id}``.
        token: Bearer token from the client-credentials exchange.
        item_id: Item id from the calendar listing.

    Returns:
        Raw API response dict with a ``liturgicalDay`` key.
    """
    resp = session.get(day_url.format(item_id=item_id), headers=bearer_headers(token))
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def parse_liturgical_day(payload: dict[str, Any]) -> LiturgicalDay:
    """Build a LiturgicalDay from a detail response.

    A reading is kept when either its title or its text is non-empty.

    Raises:
        KeyError: if the response has no ``liturgicalDay`` record.
        ValueError: if the record is null or not an object.
    """
    record = payload["liturgicalDay"]
    if not isinstance(record, dict):
        raise ValueError(f"liturgicalDay is not an object: {record!r}")

    readings = []
    for n in READING_SLOTS:
        reading = Reading(
            title=_text(record, f"reading{n}Title"),
            full_text=_text(record, f"reading{n}FullText"),
        )
        if reading.title or reading.full_text:
            readings.append(reading)

    return LiturgicalDay(
        feast_title=_text(record, "feastDayTitle"),
        fasting=_text(record, "fasting"),
        fast_designation=_text(record, "fastDesignation"),
        feast_description=_text(record, "feastDayDescription"),
        readings=tuple(readings),
    )
