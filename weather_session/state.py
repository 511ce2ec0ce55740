# ABOUTME: Single-writer store owning the screen's SessionState.
# ABOUTME: Every mutation goes through a named transition that preserves the state invariants.

import logging
from collections.abc import Callable, Sequence

from weather_session.models import LocationCandidate, SessionState, WeatherSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


class SessionStore:
    """Holds the current SessionState and notifies subscribers when it changes.

    Invariants kept by the transitions:
    - loading is only true between begin_loading() and finish_loading()
    - candidates is only non-empty while the search panel is open
    """

    def __init__(self, initial: SessionState | None = None):
        self._state = initial or SessionState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener for state changes; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin_loading(self) -> None:
        self._replace(loading=True)

    def finish_loading(self, snapshot: WeatherSnapshot | None = None) -> None:
        """End a fetch; a snapshot replaces the current one, None keeps it."""
        if snapshot is None:
            self._replace(loading=False)
        else:
            self._replace(loading=False, snapshot=snapshot)

    def open_search(self) -> None:
        self._replace(search_open=True)

    def close_search(self) -> None:
        self._replace(search_open=False, candidates=())

    def set_candidates(self, candidates: Sequence[LocationCandidate]) -> bool:
        """Replace the candidate list. Ignored (returns False) while the panel is closed."""
        if not self._state.search_open:
            logger.debug("Dropping %d candidates, search panel is closed", len(candidates))
            return False
        self._replace(candidates=tuple(candidates))
        return True

    def _replace(self, **changes):
        new_state = self._state.model_copy(update=changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
