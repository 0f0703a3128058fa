"""In-process query performance counters surfaced by the ``diag`` command."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock


@dataclass(frozen=True)
class QueryMetricsSnapshot:
    """Immutable query counter snapshot."""

    query_count: int
    total_query_time_ms: float

    @property
    def average_query_time_ms(self) -> int:
        """Mean dispatch duration rounded to whole milliseconds."""
        if self.query_count == 0:
            return 0
        return round(self.total_query_time_ms / self.query_count)


class QueryMetricsCollector:
    """Thread-safe in-process counters for dispatched queries."""

    def __init__(self) -> None:
        """Initialize empty counters."""
        self._lock = Lock()
        self._query_count = 0
        self._total_query_time_ms = 0.0

    def reset(self) -> None:
        """Reset counters for deterministic test isolation."""
        with self._lock:
            self._query_count = 0
            self._total_query_time_ms = 0.0

    def record_query(self, *, duration_ms: float) -> None:
        """Record one completed dispatch.

        Args:
            duration_ms: Wall-clock dispatch duration in milliseconds.
        """
        with self._lock:
            self._query_count += 1
            self._total_query_time_ms += max(duration_ms, 0.0)

    def snapshot(self) -> QueryMetricsSnapshot:
        """Return immutable snapshot of current counters."""
        with self._lock:
            return QueryMetricsSnapshot(
                query_count=self._query_count,
                total_query_time_ms=self._total_query_time_ms,
            )
