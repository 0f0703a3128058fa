"""Keystroke coalescing for expensive commands."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from threading import Lock

_LOGGER = logging.getLogger(__name__)


class DebounceState:
    """Latest-query timestamp shared by every dispatch of one router.

    Timestamps are strictly increasing: a mark never rolls the value back and
    two marks never compare equal, so supersession is always observable.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        """Create state seeded from the clock.

        Args:
            clock: Nanosecond clock used to stamp queries.
        """
        self._clock = clock
        self._lock = Lock()
        self._last_query_ns = clock()

    @property
    def last_query_ns(self) -> int:
        """Timestamp of the most recently marked query."""
        with self._lock:
            return self._last_query_ns

    def mark(self) -> int:
        """Record a new query as the latest one.

        Returns:
            Ticket identifying this query for later supersession checks.
        """
        now = self._clock()
        with self._lock:
            self._last_query_ns = max(now, self._last_query_ns + 1)
            return self._last_query_ns

    def is_superseded(self, ticket: int) -> bool:
        """Return whether a query newer than ``ticket`` has been marked."""
        with self._lock:
            return self._last_query_ns > ticket


class Debouncer:
    """Hold expensive work for a quiet interval and drop superseded calls.

    Suppression only prevents new expensive work from starting; a handler
    that has already passed the gate always runs to completion.
    """

    def __init__(
        self,
        state: DebounceState,
        *,
        quiet_interval_ms: int = 500,
        enabled: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Create debouncer over shared state.

        Args:
            state: Shared latest-query state.
            quiet_interval_ms: Wait before the staleness check.
            enabled: Whether gating is active at all.
            sleep: Blocking sleep taking seconds.
        """
        self._state = state
        self._quiet_interval_s = quiet_interval_ms / 1000
        self._enabled = enabled
        self._sleep = sleep

    @property
    def enabled(self) -> bool:
        """Whether the quiet-interval gate is active."""
        return self._enabled

    def admit(self, ticket: int) -> bool:
        """Wait out the quiet interval and report whether work may start.

        Args:
            ticket: Ticket returned by ``DebounceState.mark`` for this query.

        Returns:
            ``False`` when a newer query arrived during the wait.
        """
        if not self._enabled:
            return True
        self._sleep(self._quiet_interval_s)
        if self._state.is_superseded(ticket):
            _LOGGER.debug("Query %d superseded during quiet interval", ticket)
            return False
        return True
