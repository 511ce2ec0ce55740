# ABOUTME: Tests for environment-driven settings and controller wiring.
# ABOUTME: Validates defaults, overrides, .env loading, validation errors, and build_controller.

import logging
import os
from unittest.mock import AsyncMock

import httpx
import pytest

from weather_session.config import Settings, configure_logging
from weather_session.controller import WeatherSessionController
from weather_session.deps import build_controller, create_deps
from weather_session.errors import ConfigError
from weather_session.storage import JsonFileStore
from weather_session.weather_service import WeatherApiClient


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any WEATHER_* variables inherited from the outer environment."""
    for key in list(os.environ):
        if key.upper().startswith("WEATHER_"):
            monkeypatch.delenv(key)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        """Settings without environment variables use the screen's defaults.

        Implementation: Loads settings with no WEATHER_* variables and no .env file.
        Passing implies: İzmir, 7 days and a 1.2 s debounce are the baseline.
        """
        settings = Settings.from_env(env_file=None)
        assert settings.default_city == "İzmir"
        assert settings.forecast_days == 7
        assert settings.search_delay == 1.2
        assert settings.min_query_length == 2
        assert settings.api_url == "https://api.weatherapi.com/v1"

    def test_env_overrides(self, clean_env):
        """WEATHER_* variables override defaults with type coercion.

        Implementation: Sets string values for several fields plus an unrelated variable.
        Passing implies: Environment configuration reaches typed settings.
        """
        clean_env.setenv("WEATHER_API_KEY", "abc")
        clean_env.setenv("WEATHER_DEFAULT_CITY", "Paris")
        clean_env.setenv("WEATHER_FORECAST_DAYS", "3")
        clean_env.setenv("WEATHER_SEARCH_DELAY", "0.5")
        clean_env.setenv("UNRELATED", "x")

        settings = Settings.from_env(env_file=None)
        assert settings.api_key == "abc"
        assert settings.default_city == "Paris"
        assert settings.forecast_days == 3
        assert settings.search_delay == 0.5

    def test_reads_env_file(self, clean_env, tmp_path):
        """Values in the .env file are picked up.

        Implementation: Writes a .env file with a key and city, loads from it.
        Passing implies: Local development can configure the package without exporting variables.
        """
        env_file = tmp_path / ".env"
        env_file.write_text("WEATHER_API_KEY=from-file\nWEATHER_DEFAULT_CITY=Ankara\n", encoding="utf-8")

        settings = Settings.from_env(env_file=env_file)
        assert settings.api_key == "from-file"
        assert settings.default_city == "Ankara"

    def test_invalid_value_raises_config_error(self, clean_env):
        """Out-of-range values raise ConfigError.

        Implementation: Requests a 30-day horizon.
        Passing implies: Bad configuration fails at startup with the package's error type.
        """
        clean_env.setenv("WEATHER_FORECAST_DAYS", "30")
        with pytest.raises(ConfigError):
            Settings.from_env(env_file=None)

    def test_missing_api_key(self, clean_env):
        """require_api_key raises ConfigError when no key is configured.

        Implementation: Calls require_api_key on default settings.
        Passing implies: The HTTP client is never built without credentials.
        """
        with pytest.raises(ConfigError):
            Settings.from_env(env_file=None).require_api_key()


class TestBuildController:
    def test_wires_concrete_adapters(self, clean_env, tmp_path):
        """build_controller connects the WeatherAPI client and JSON store with configured values.

        Implementation: Builds from settings with a key, store path and custom delay.
        Passing implies: Settings flow into the controller and its debouncer.
        """
        clean_env.setenv("WEATHER_API_KEY", "abc")
        clean_env.setenv("WEATHER_STORE_PATH", str(tmp_path / "s.json"))
        clean_env.setenv("WEATHER_SEARCH_DELAY", "0.3")
        settings = Settings.from_env(env_file=None)
        deps = create_deps(settings, http_client=AsyncMock(spec=httpx.AsyncClient))
        controller = build_controller(settings, deps)

        assert isinstance(controller, WeatherSessionController)
        assert isinstance(controller.weather, WeatherApiClient)
        assert controller.weather.api_key == "abc"
        assert isinstance(controller.persistence, JsonFileStore)
        assert controller.persistence.path == tmp_path / "s.json"
        assert controller.debouncer.delay == 0.3
        assert controller.default_city == "İzmir"


class TestConfigureLogging:
    def test_quiets_httpx(self):
        """configure_logging raises the httpx logger threshold to WARNING.

        Implementation: Calls the helper and inspects the httpx logger.
        Passing implies: Request-per-line httpx logs do not drown package logs.
        """
        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
