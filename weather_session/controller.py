# ABOUTME: Session controller orchestrating initial load, debounced search, and city selection.
# ABOUTME: Catches every port failure at its boundary so the screen state never gets stuck loading.

import logging

from weather_session.debounce import DEFAULT_DELAY, Debouncer
from weather_session.errors import LocationNotFoundError, PersistenceError, WeatherSessionError
from weather_session.models import LocationCandidate, SessionState
from weather_session.ports import PersistencePort, WeatherDataPort
from weather_session.state import SessionStore

logger = logging.getLogger(__name__)

CITY_KEY = "city"
DEFAULT_CITY = "İzmir"
FORECAST_DAYS = 7
MIN_QUERY_LENGTH = 2


class WeatherSessionController:
    """Drives the weather screen's SessionState from user events and port responses.

    In-flight requests are never cancelled: when two forecast fetches overlap, whichever
    response arrives last is displayed. Search results are discarded when the panel has been
    closed or a candidate selected since the search was sent.
    """

    def __init__(
        self,
        weather: WeatherDataPort,
        persistence: PersistencePort,
        store: SessionStore | None = None,
        default_city: str = DEFAULT_CITY,
        forecast_days: int = FORECAST_DAYS,
        search_delay: float = DEFAULT_DELAY,
        min_query_length: int = MIN_QUERY_LENGTH,
    ):
        self.weather = weather
        self.persistence = persistence
        self.store = store or SessionStore()
        self.default_city = default_city
        self.forecast_days = forecast_days
        self.min_query_length = min_query_length
        self.debouncer = Debouncer(self._search, delay=search_delay)
        self._search_generation = 0

    @property
    def state(self) -> SessionState:
        return self.store.state

    async def initialize(self) -> None:
        """Load the forecast for the persisted city, or the default city when none is stored."""
        city = await self._stored_city()
        logger.info("Initializing weather session for %s", city)
        self.store.begin_loading()
        await self._load_forecast(city)

    async def refresh(self) -> None:
        """Re-fetch the forecast for the city currently on screen."""
        snapshot = self.state.snapshot
        city = snapshot.location.name if snapshot is not None else await self._stored_city()
        self.store.begin_loading()
        await self._load_forecast(city)

    def toggle_search(self) -> None:
        """Open or close the search panel. Closing discards candidates and any pending search."""
        if self.state.search_open:
            self.debouncer.cancel()
            self._search_generation += 1
            self.store.close_search()
        else:
            self.store.open_search()

    def text_changed(self, text: str) -> None:
        """Feed search box input through the debouncer. Ignored while the panel is closed."""
        if not self.state.search_open:
            return
        self.debouncer.submit(text)

    async def select_candidate(self, candidate: LocationCandidate) -> None:
        """Show the forecast for candidate and remember it as the last chosen city."""
        self.debouncer.cancel()
        self._search_generation += 1
        self.store.begin_loading()
        self.store.close_search()

        if await self._load_forecast(candidate.name):
            await self._remember_city(candidate.name)

    async def aclose(self) -> None:
        await self.debouncer.aclose()

    async def _search(self, query: str) -> None:
        query = (query or "").strip()
        if len(query) <= self.min_query_length:
            return

        generation = self._search_generation
        try:
            candidates = await self.weather.search_locations(query)
        except LocationNotFoundError:
            logger.info("No locations match %r", query)
            candidates = []
        except WeatherSessionError as e:
            logger.warning("Location search for %r failed: %s", query, e)
            return
        except Exception:
            logger.exception("Unexpected error searching locations for %r", query)
            return

        if generation != self._search_generation:
            logger.debug("Dropping stale results for %r", query)
            return
        self.store.set_candidates(candidates)

    async def _load_forecast(self, city: str) -> bool:
        """Fetch and display the forecast for city. Returns whether a snapshot was stored."""
        try:
            snapshot = await self.weather.fetch_forecast(city, self.forecast_days)
        except WeatherSessionError as e:
            logger.warning("Could not load forecast for %s: %s", city, e)
            self.store.finish_loading()
            return False
        except Exception:
            logger.exception("Unexpected error loading forecast for %s", city)
            self.store.finish_loading()
            return False

        self.store.finish_loading(snapshot)
        return True

    async def _stored_city(self) -> str:
        try:
            city = await self.persistence.get(CITY_KEY)
        except PersistenceError as e:
            logger.warning("Could not read last city, using %s: %s", self.default_city, e)
            city = None
        except Exception:
            logger.exception("Unexpected error reading last city, using %s", self.default_city)
            city = None
        return city or self.default_city

    async def _remember_city(self, city: str) -> None:
        try:
            await self.persistence.set(CITY_KEY, city)
        except PersistenceError as e:
            logger.warning("Could not persist last city %s: %s", city, e)
        except Exception:
            logger.exception("Unexpected error persisting last city %s", city)
