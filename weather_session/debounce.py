# ABOUTME: Debouncer that coalesces bursts of text input into one downstream call.
# ABOUTME: Uses a single cancellable loop.call_later handle, replaced on every submit.

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 1.2


class Debouncer:
    """Dispatch only the last query of a burst, once the input has been quiet for delay seconds.

    The callback may be a plain function or a coroutine function. Coroutines are run as
    tasks on the same loop; the debouncer holds a reference to them until they finish.
    """

    def __init__(self, callback: Callable[[str], Awaitable[None] | None], delay: float = DEFAULT_DELAY):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._query: str | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """Whether a dispatch is currently scheduled."""
        return self._handle is not None

    def submit(self, query: str) -> None:
        """Record query and restart the quiet-period timer. Must be called from the running loop."""
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._query = query
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop any scheduled dispatch. Already-dispatched calls keep running."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._query = None

    async def aclose(self) -> None:
        """Cancel the timer and wait for dispatched callbacks to finish."""
        self.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _fire(self) -> None:
        query = self._query
        self._handle = None
        self._query = None
        logger.debug("Debounced dispatch for %r", query)

        result = self.callback(query)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
