# ABOUTME: Protocol definitions for the collaborators the session controller depends on.
# ABOUTME: The weather data port and the key/value persistence port.

from typing import Protocol

from weather_session.models import LocationCandidate, WeatherSnapshot


class WeatherDataPort(Protocol):
    """Remote source of location search results and forecasts."""

    async def search_locations(self, prefix: str) -> list[LocationCandidate]:
        """Return locations matching prefix.

        Raises:
            NetworkError: transport failure
            LocationNotFoundError: nothing matched (an empty result counts as no match)
        """
        ...

    async def fetch_forecast(self, city_name: str, days: int) -> WeatherSnapshot:
        """Return current weather plus a days-long forecast for city_name.

        Raises:
            NetworkError: transport failure
            UnknownCityError: the provider could not resolve city_name
            MalformedResponseError: the body violated the expected contract
        """
        ...


class PersistencePort(Protocol):
    """String key/value store used to remember the last chosen city."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None:
        """Store value under key, raising PersistenceError on failure."""
        ...
