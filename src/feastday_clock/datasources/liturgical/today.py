"""Today's liturgical day: token -> calendar listing -> day detail.

The three calls are strictly sequential; each needs the previous result.
Any failure aborts the whole fetch, so a partial LiturgicalDay is never
returned.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from feastday_clock.datasources.liturgical.calendar import (
    fetch_calendar_dates,
    find_calendar_date,
)
from feastday_clock.datasources.liturgical.client import (
    LiturgicalConfigError,
    fetch_access_token,
)
from feastday_clock.datasources.liturgical.day import fetch_liturgical_day, parse_liturgical_day

if TYPE_CHECKING:
    import requests

    from feastday_clock.config import Settings
    from feastday_clock.schemas import LiturgicalDay

logger = logging.getLogger(__name__)


def _require_config(settings: Settings) -> None:
    missing = [
        name
        for name, value in (
            ("LITURGICAL_TOKEN_URL", settings.liturgical_token_url),
            ("LITURGICAL_CALENDAR_URL", settings.liturgical_calendar_url),
            ("LITURGICAL_DAY_URL", settings.liturgical_day_url),
            ("LITURGICAL_CLIENT_ID", settings.liturgical_client_id),
            ("LITURGICAL_CLIENT_SECRET", settings.liturgical_client_secret.get_secret_value()),
        )
        if not value
    ]
    if missing:
        msg = f"Liturgical API not configured, missing: {', '.join(missing)}"
        raise LiturgicalConfigError(msg)


def get_liturgical_day(
    session: requests.Session,
    settings: Settings,
    today: date | None = None,
) -> LiturgicalDay:
    """
    Fetch the liturgical day for ``today`` (default: local calendar date).

    Raises:
        LiturgicalConfigError: if endpoints or credentials are missing.
        LiturgicalDayNotFound: if the listing has no entry for today.
        requests.RequestException: on any transport or HTTP status failure.
    """
    _require_config(settings)
    today = today or date.today()

    token = fetch_access_token(
        session,
        settings.liturgical_token_url,
        settings.liturgical_client_id,
        settings.liturgical_client_secret.get_secret_value(),
    )
    dates = fetch_calendar_dates(session, settings.liturgical_calendar_url, token)
    entry = find_calendar_date(dates, today)
    logger.debug("Liturgical item %s for %s", entry.item_id, today.isoformat())

    payload = fetch_liturgical_day(session, settings.liturgical_day_url, token, entry.item_id)
    return parse_liturgical_day(payload)
