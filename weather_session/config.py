# ABOUTME: Environment-driven settings for the weather session, read from WEATHER_* variables and .env.
# ABOUTME: Also provides an opt-in logging setup for applications embedding the package.

import logging
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_session.errors import ConfigError


class Settings(BaseSettings):
    """Runtime configuration; every field maps to a WEATHER_* environment variable."""

    api_key: str = ""
    api_url: str = "https://api.weatherapi.com/v1"
    default_city: str = Field(default="İzmir", min_length=1)
    forecast_days: int = Field(default=7, ge=1, le=14)
    search_delay: float = Field(default=1.2, ge=0)
    min_query_length: int = Field(default=2, ge=0)
    http_timeout: float = Field(default=10.0, gt=0)
    store_path: str = "~/.weather_session.json"

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def from_env(cls, env_file: str | Path | None = ".env") -> "Settings":
        """Load settings from the environment and env_file, raising ConfigError on bad values."""
        try:
            return cls(_env_file=env_file)
        except ValidationError as e:
            raise ConfigError(f"Invalid weather settings: {e}") from e

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError("WEATHER_API_KEY is not set")
        return self.api_key


def configure_logging(level: str = "INFO") -> None:
    """Send package logs to stderr at level and keep httpx request logs quiet."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
