# ABOUTME: Exception hierarchy for the weather session package.
# ABOUTME: Adapters translate httpx, pydantic, and filesystem failures into these types.

from typing import Any


class WeatherSessionError(Exception):
    """Base exception for weather session errors.

    Carries a human-readable message and optional structured details for logging.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NetworkError(WeatherSessionError):
    """Transient transport failure: no connectivity, timeout, or a 5xx from the provider."""


class WeatherApiError(WeatherSessionError):
    """The provider rejected the request (bad key, quota, malformed query)."""


class LocationNotFoundError(WeatherSessionError):
    """A location search yielded no candidates."""


class UnknownCityError(LocationNotFoundError):
    """The forecast endpoint could not resolve the requested city."""


class MalformedResponseError(WeatherSessionError):
    """The provider returned a body that does not match the expected contract."""


class PersistenceError(WeatherSessionError):
    """Reading or writing the key/value store failed."""


class ConfigError(WeatherSessionError):
    """Configuration is missing or invalid."""
