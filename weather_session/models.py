# ABOUTME: Pydantic BaseModels for WeatherAPI.com forecast/search data and the screen's session state.
# ABOUTME: Defines location candidates, weather snapshots, and the immutable SessionState value.

from datetime import date

from pydantic import BaseModel, ConfigDict


class LocationCandidate(BaseModel):
    """A location returned by a prefix search, pending user selection.

    Identifying fields beyond name and country are passed through untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    country: str = ""
    id: int | None = None
    region: str | None = None
    lat: float | None = None
    lon: float | None = None
    url: str | None = None


class Condition(BaseModel):
    """Weather condition text with the provider's icon and code."""

    text: str
    icon: str | None = None
    code: int | None = None


class Location(BaseModel):
    """Resolved location a forecast belongs to."""

    name: str
    country: str = ""
    region: str | None = None
    localtime: str | None = None


class CurrentWeather(BaseModel):
    """Current observation for the snapshot's location."""

    temp_c: float
    condition: Condition
    wind_kph: float | None = None
    humidity: int | None = None


class DaySummary(BaseModel):
    avgtemp_c: float | None = None
    condition: Condition | None = None


class Astro(BaseModel):
    sunrise: str | None = None
    sunset: str | None = None


class ForecastDay(BaseModel):
    """One day of forecast data from the forecast endpoint."""

    date: date
    day: DaySummary = DaySummary()
    astro: Astro = Astro()

    @property
    def day_name(self) -> str:
        """English weekday name for this entry's date, e.g. 'Monday'."""
        return self.date.strftime("%A")


class Forecast(BaseModel):
    forecastday: list[ForecastDay] = []


class WeatherSnapshot(BaseModel):
    """Wholesale-replaced weather payload for one location and horizon."""

    model_config = ConfigDict(frozen=True)

    location: Location
    current: CurrentWeather
    forecast: Forecast = Forecast()

    @property
    def days(self) -> list[ForecastDay]:
        return self.forecast.forecastday

    @property
    def today_sunrise(self) -> str | None:
        """Sunrise time of the first forecast day, if any."""
        if not self.days:
            return None
        return self.days[0].astro.sunrise


class SessionState(BaseModel):
    """Observable state of the weather screen.

    Values are immutable; SessionStore swaps in a new instance on every transition.
    """

    model_config = ConfigDict(frozen=True)

    loading: bool = True
    search_open: bool = False
    candidates: tuple[LocationCandidate, ...] = ()
    snapshot: WeatherSnapshot | None = None
