# ABOUTME: Dependency container and factories wiring the controller to its concrete adapters.
# ABOUTME: Holds the httpx.AsyncClient used by the WeatherAPI.com client.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_session.config import Settings
from weather_session.controller import WeatherSessionController
from weather_session.storage import JsonFileStore
from weather_session.weather_service import WeatherApiClient


class SessionDeps(BaseModel):
    """Concrete collaborators for a WeatherSessionController."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    weather: WeatherApiClient
    persistence: JsonFileStore


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with the configured timeout.

    Timeouts surface as httpx.TimeoutException, which the weather client reports as NetworkError.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))


def create_deps(settings: Settings, http_client: httpx.AsyncClient | None = None) -> SessionDeps:
    client = http_client or create_http_client(settings)
    return SessionDeps(
        http_client=client,
        weather=WeatherApiClient(client, settings.require_api_key(), settings.api_url),
        persistence=JsonFileStore(settings.store_path),
    )


def build_controller(settings: Settings, deps: SessionDeps | None = None) -> WeatherSessionController:
    """Build a controller over WeatherAPI.com and the JSON file store described by settings."""
    deps = deps or create_deps(settings)
    return WeatherSessionController(
        deps.weather,
        deps.persistence,
        default_city=settings.default_city,
        forecast_days=settings.forecast_days,
        search_delay=settings.search_delay,
        min_query_length=settings.min_query_length,
    )
