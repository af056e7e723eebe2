"""
Page assembly: fetch both data sources through their caches, render, fill
the HTML template.

The two fetches run concurrently. Blocking work (``requests`` calls and the
template read) runs in worker threads via ``asyncio.to_thread`` so the event
loop keeps serving other requests.

Any fetch failure is logged and degrades only the sections that depend on
it; leftover ``{{TOKEN}}`` markers are then stripped so the client always
gets a clean page.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from feastday_clock.cache import get_or_fetch
from feastday_clock.datasources.liturgical import get_liturgical_day
from feastday_clock.datasources.weather import fetch_forecast, parse_snapshot
from feastday_clock.renderers.feast import (
    build_feast_description_html,
    build_feast_title_html,
    build_readings_html,
)
from feastday_clock.renderers.page import PageContext, substitute_placeholders
from feastday_clock.renderers.weather import (
    WEATHER_UNAVAILABLE,
    build_forecast_html,
    build_high_low_html,
    build_weather_temp_html,
)

if TYPE_CHECKING:
    from feastday_clock.flows.context import RequestContext
    from feastday_clock.schemas import LiturgicalDay, WeatherSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# Data loading
# =============================================================================


def _fetch_weather_sync(ctx: RequestContext) -> WeatherSnapshot:
    settings = ctx.settings
    payload = fetch_forecast(
        ctx.session,
        settings.lat,
        settings.lon,
        timezone=settings.timezone,
        forecast_days=settings.forecast_days,
    )
    return parse_snapshot(payload, include_forecast=settings.show_forecast)


async def load_weather(ctx: RequestContext) -> WeatherSnapshot:
    """Current weather, from cache when fresh."""
    return await get_or_fetch(
        ctx.weather_cache,
        ctx.settings.cache_ttl_seconds,
        lambda: asyncio.to_thread(_fetch_weather_sync, ctx),
        ctx.clock,
    )


async def load_liturgical_day(ctx: RequestContext) -> LiturgicalDay:
    """Today's liturgical day, from cache when fresh."""
    return await get_or_fetch(
        ctx.liturgical_cache,
        ctx.settings.cache_ttl_seconds,
        lambda: asyncio.to_thread(get_liturgical_day, ctx.session, ctx.settings, ctx.today()),
        ctx.clock,
    )


async def read_template(path: Path) -> str:
    """Read the page template from disk (never cached)."""
    return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")


# =============================================================================
# Rendering
# =============================================================================


def build_page_context(
    weather: WeatherSnapshot | None,
    day: LiturgicalDay | None,
    *,
    show_fasting: bool = True,
) -> PageContext:
    """Render fragments for whichever data is available."""
    if weather is None:
        weather_temp = WEATHER_UNAVAILABLE
        weather_high_low = forecast = ""
    else:
        weather_temp = build_weather_temp_html(weather)
        weather_high_low = build_high_low_html(weather)
        forecast = build_forecast_html(weather)

    if day is None:
        title = description = readings = ""
    else:
        title = build_feast_title_html(day, show_fasting=show_fasting)
        description = build_feast_description_html(day)
        readings = build_readings_html(day)

    return PageContext(
        weather_temp=weather_temp,
        weather_high_low=weather_high_low,
        forecast=forecast,
        feast_day_title=title,
        feast_day_description=description,
        readings=readings,
    )


async def render_page(ctx: RequestContext) -> str:
    """Render the full page. Upstream failures never escape this function.

    A template that cannot be read is retried once on the degraded path; a
    second read failure propagates.
    """
    weather_result, day_result = await asyncio.gather(
        load_weather(ctx),
        load_liturgical_day(ctx),
        return_exceptions=True,
    )

    weather: WeatherSnapshot | None = None
    day: LiturgicalDay | None = None
    degraded = False

    if isinstance(weather_result, BaseException):
        logger.error("Error fetching weather", exc_info=weather_result)
        degraded = True
    else:
        weather = weather_result

    if isinstance(day_result, BaseException):
        logger.error("Error fetching liturgical day", exc_info=day_result)
        degraded = True
    else:
        day = day_result

    page = build_page_context(weather, day, show_fasting=ctx.settings.show_fasting)

    try:
        template = await read_template(ctx.settings.template_path)
    except OSError:
        logger.exception("Error reading page template %s", ctx.settings.template_path)
        template = await read_template(ctx.settings.template_path)
        degraded = True

    return substitute_placeholders(template, page, strip_unknown=degraded)
