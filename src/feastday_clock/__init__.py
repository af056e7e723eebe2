"""Feast-day clock - current weather and today's feast on one kiosk page.

Architecture::

    datasources/   External APIs (Open-Meteo weather, liturgical calendar)
    cache.py       In-memory TTL cache entries shared across requests
    renderers/     Pure data -> HTML fragments and placeholder substitution
    flows/         Request context and page assembly (fetch through cache, render)
    services/      Shared utilities (HTTP session with default timeout)
    server.py      aiohttp app serving ``GET /``

Data flow: datasources -> cache -> renderers -> HTML template -> response

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New page section:  renderers/__init__.py
"""

__version__ = "0.1.0"

from feastday_clock.config import Settings
from feastday_clock.schemas import LiturgicalDay, WeatherSnapshot

__all__ = ["LiturgicalDay", "Settings", "WeatherSnapshot", "__version__"]
