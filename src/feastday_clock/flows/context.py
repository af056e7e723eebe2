"""Request-handling context: settings, HTTP session and the two cache entries.

One ``RequestContext`` is built at server start and shared by every request,
so the caches live for the process lifetime. Tests build their own context
and get fresh, isolated caches.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

import requests

from feastday_clock.cache import CacheEntry, Clock
from feastday_clock.config import Settings, get_settings
from feastday_clock.schemas import LiturgicalDay, WeatherSnapshot
from feastday_clock.services.http import create_session


@dataclass
class RequestContext:
    """Everything the page flow needs, passed in instead of module globals."""

    settings: Settings
    session: requests.Session
    weather_cache: CacheEntry[WeatherSnapshot] = field(
        default_factory=lambda: CacheEntry("weather")
    )
    liturgical_cache: CacheEntry[LiturgicalDay] = field(
        default_factory=lambda: CacheEntry("liturgical-day")
    )
    clock: Clock = time.time
    today: Callable[[], date] = date.today


def create_context(settings: Settings | None = None) -> RequestContext:
    """Build a context with a new HTTP session and empty caches."""
    settings = settings or get_settings()
    session = create_session(timeout=settings.http_timeout_seconds)
    return RequestContext(settings=settings, session=session)
