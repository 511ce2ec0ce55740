# ABOUTME: Service layer for WeatherAPI.com calls and response parsing.
# ABOUTME: Implements the weather data port: location search and forecast retrieval over httpx.

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from weather_session.errors import (
    LocationNotFoundError,
    MalformedResponseError,
    NetworkError,
    UnknownCityError,
    WeatherApiError,
)
from weather_session.models import LocationCandidate, WeatherSnapshot

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
SEARCH_PATH = "/search.json"
FORECAST_PATH = "/forecast.json"

# WeatherAPI.com error code for "No matching location found."
NO_MATCHING_LOCATION = 1006

_candidates_adapter = TypeAdapter(list[LocationCandidate])


class WeatherApiClient:
    """Weather data port backed by the WeatherAPI.com REST endpoints."""

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str = DEFAULT_BASE_URL):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def search_locations(self, prefix: str) -> list[LocationCandidate]:
        """Search locations whose name starts with prefix."""
        data = await self._get(SEARCH_PATH, {"q": prefix})
        candidates = parse_candidates(data)
        if not candidates:
            raise LocationNotFoundError(f"No locations match '{prefix}'", {"query": prefix})
        return candidates

    async def fetch_forecast(self, city_name: str, days: int = 7) -> WeatherSnapshot:
        """Fetch current weather and a days-long forecast for city_name."""
        data = await self._get(
            FORECAST_PATH,
            {"q": city_name, "days": days, "aqi": "no", "alerts": "no"},
        )
        return parse_snapshot(data)

    async def _get(self, path: str, params: dict):
        url = f"{self.base_url}{path}"
        try:
            resp = await self.client.get(url, params={"key": self.api_key, **params})
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {path} failed: {e}", {"path": path}) from e

        if resp.status_code >= 500:
            raise NetworkError(f"{path} returned {resp.status_code}", {"path": path, "status": resp.status_code})
        if resp.status_code >= 400:
            _raise_for_api_error(resp, params.get("q", ""))

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"{path} returned a non-JSON body", {"path": path}) from e


def parse_candidates(data) -> list[LocationCandidate]:
    """Parse the search endpoint's array of locations into LocationCandidate objects."""
    if data is None:
        return []
    try:
        return _candidates_adapter.validate_python(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected search payload: {e.error_count()} errors") from e


def parse_snapshot(data) -> WeatherSnapshot:
    """Parse a forecast.json body into a WeatherSnapshot."""
    try:
        return WeatherSnapshot.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected forecast payload: {e.error_count()} errors") from e


def _raise_for_api_error(resp: httpx.Response, query: str):
    """Translate a 4xx WeatherAPI.com response into the matching exception."""
    code = None
    message = resp.reason_phrase
    try:
        error = resp.json().get("error") or {}
        code = error.get("code")
        message = error.get("message", message)
    except (ValueError, AttributeError):
        logger.debug("Error response from %s had no JSON error body", resp.url)

    details = {"status": resp.status_code, "code": code, "query": query}
    if code == NO_MATCHING_LOCATION:
        raise UnknownCityError(f"Unknown city '{query}': {message}", details)
    raise WeatherApiError(f"Weather API error {resp.status_code}: {message}", details)
