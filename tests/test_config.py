"""Tests for environment-driven settings."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from feastday_clock.config import DEFAULT_TEMPLATE_PATH, Settings


class TestIsolation:
    """The test environment starts without any settings variables."""

    def test_settings_env_vars_cleared(self) -> None:
        leaked = [name for name in Settings.model_fields if name.upper() in os.environ]
        assert leaked == []

    def test_defaults_hold_despite_shell_env(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.show_forecast is True
        assert settings.show_fasting is True
        assert settings.template_path == DEFAULT_TEMPLATE_PATH


class TestDefaults:
    """Defaults match the Madison, MS kiosk."""

    def test_port_and_host(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"

    def test_location(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.lat == pytest.approx(32.4610)
        assert settings.lon == pytest.approx(-90.1153)
        assert settings.timezone == "America/Chicago"

    def test_cache_ttl_is_five_minutes(self) -> None:
        assert Settings(_env_file=None).cache_ttl_seconds == 300

    def test_template_ships_with_package(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.template_path == DEFAULT_TEMPLATE_PATH
        assert DEFAULT_TEMPLATE_PATH.exists()

    def test_liturgical_credentials_not_baked_in(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.liturgical_client_id == ""
        assert settings.liturgical_client_secret.get_secret_value() == ""


class TestEnvironment:
    """Environment variables override defaults."""

    def test_port_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8081")
        assert Settings(_env_file=None).port == 8081

    def test_invalid_port_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_secret_not_in_repr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LITURGICAL_CLIENT_SECRET", "hunter2")
        settings = Settings(_env_file=None)
        assert settings.liturgical_client_secret.get_secret_value() == "hunter2"
        assert "hunter2" not in repr(settings)


class TestForecastDays:
    """Feature flag selects the Open-Meteo day count."""

    def test_forecast_on(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHOW_FORECAST", "true")
        assert Settings(_env_file=None).forecast_days == 8

    def test_forecast_off(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHOW_FORECAST", "false")
        assert Settings(_env_file=None).forecast_days == 1
