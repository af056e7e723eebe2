"""Shared fixtures: settings, fake upstream responses, request contexts."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from feastday_clock.config import DEFAULT_TEMPLATE_PATH, Settings
from feastday_clock.flows.context import RequestContext

TOKEN_URL = "https://auth.example.test/oauth/token"
CALENDAR_URL = "https://lit.example.test/api/calendar-dates"
DAY_URL = "https://lit.example.test/api/days/{item_id}"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

TODAY = date(2024, 1, 1)


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from the environment and any local .env."""
    values: dict[str, Any] = {
        "liturgical_token_url": TOKEN_URL,
        "liturgical_calendar_url": CALENDAR_URL,
        "liturgical_day_url": DAY_URL,
        "liturgical_client_id": "clock-client",
        "liturgical_client_secret": "s3cret",
        "template_path": DEFAULT_TEMPLATE_PATH,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def json_response(payload: Any, status: int = 200) -> Mock:
    """A Mock standing in for ``requests.Response``."""
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status = Mock()
    return resp


def weather_payload(days: int = 8) -> dict[str, Any]:
    """Open-Meteo response: 71.4°F now, partly cloudy, 75.2/58.9 today."""
    times = [f"2024-01-{n:02d}" for n in range(1, days + 1)]
    return {
        "current": {"temperature_2m": 71.4, "weather_code": 2},
        "daily": {
            "time": times,
            "temperature_2m_max": [75.2 + n for n in range(days)],
            "temperature_2m_min": [58.9 - n for n in range(days)],
            "weather_code": [2, 0, 61, 3, 95, 71, 45, 1][:days],
        },
    }


def calendar_payload() -> list[dict[str, Any]]:
    return [
        {"year": 2023, "month": 12, "day": 31, "itemId": "item-1231"},
        {"year": 2024, "month": 1, "day": 1, "itemId": "item-0101"},
        {"year": 2024, "month": 1, "day": 2, "itemId": "item-0102"},
    ]


def day_payload(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "feastDayTitle": "Solemnity of Mary, Mother of God",
        "fasting": None,
        "fastDesignation": "Fast-free",
        "feastDayDescription": "Octave day of Christmas.",
        "reading1Title": "Numbers 6:22-27",
        "reading1FullText": "The LORD said to Moses...",
        "reading2Title": "Galatians 4:4-7",
        "reading2FullText": "When the fullness of time had come...",
        "reading3Title": None,
        "reading3FullText": None,
    }
    record.update(overrides)
    return {"liturgicalDay": record}


class FakeUpstream:
    """Routes session calls by URL to canned responses and counts them."""

    def __init__(self) -> None:
        self.weather = json_response(weather_payload())
        self.token = json_response({"access_token": "tok-123", "token_type": "Bearer"})
        self.calendar = json_response(calendar_payload())
        self.day = json_response(day_payload())
        self.session = Mock(spec=requests.Session)
        self.session.get.side_effect = self._get
        self.session.post.side_effect = self._post

    def _get(self, url: str, **_kwargs: Any) -> Any:
        if url == OPEN_METEO_URL:
            return _resolve(self.weather)
        if url == CALENDAR_URL:
            return _resolve(self.calendar)
        if url.startswith("https://lit.example.test/api/days/"):
            return _resolve(self.day)
        raise AssertionError(f"unexpected GET {url}")

    def _post(self, url: str, **_kwargs: Any) -> Any:
        assert url == TOKEN_URL
        return _resolve(self.token)

    def calls_to(self, url: str) -> int:
        return sum(1 for c in self.session.get.call_args_list if c.args[0] == url)


def _resolve(response: Any) -> Any:
    if isinstance(response, BaseException):
        raise response
    return response


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of every Settings built in tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def ctx(settings: Settings, upstream: FakeUpstream) -> RequestContext:
    return RequestContext(
        settings=settings,
        session=upstream.session,
        clock=lambda: 1_700_000_000.0,
        today=lambda: TODAY,
    )


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    path = tmp_path / "index.html"
    path.write_text(
        "<main>\n"
        "<p id='temp'>{{WEATHER_TEMP}}</p>\n"
        "<p id='hl'>{{WEATHER_HIGH_LOW}}</p>\n"
        "<div id='forecast'>{{FORECAST}}</div>\n"
        "<h2>{{FEAST_DAY_TITLE}}</h2>\n"
        "<footer>{{UNKNOWN_TOKEN}}</footer>\n"
        "</main>\n",
        encoding="utf-8",
    )
    return path
