"""Local host context that times dispatches."""

from __future__ import annotations

import time
from pathlib import Path

from playdeck.commands.types import Result
from playdeck.observability import QueryMetricsCollector
from playdeck.runtime.dispatcher import QueryDispatcher


class LocalHost:
    """Host context for running the router outside a launcher process."""

    def __init__(
        self,
        plugin_directory: Path,
        metrics: QueryMetricsCollector | None = None,
    ) -> None:
        """Store plugin directory and counters.

        Args:
            plugin_directory: Directory holding plugin-local files.
            metrics: Optional shared counters.
        """
        self._plugin_directory = plugin_directory
        self._metrics = metrics or QueryMetricsCollector()

    @property
    def plugin_directory(self) -> Path:
        return self._plugin_directory

    @property
    def query_count(self) -> int:
        return self._metrics.snapshot().query_count

    @property
    def average_query_time_ms(self) -> int:
        return self._metrics.snapshot().average_query_time_ms

    def run_query(self, dispatcher: QueryDispatcher, text: str) -> list[Result] | None:
        """Dispatch one query and record its duration.

        Args:
            dispatcher: Router receiving the query.
            text: Raw query text.

        Returns:
            Dispatcher output.
        """
        started = time.perf_counter()
        try:
            return dispatcher.dispatch(text)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            self._metrics.record_query(duration_ms=elapsed_ms)
