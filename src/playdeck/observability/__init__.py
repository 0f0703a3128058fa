"""Observability exports."""

from playdeck.observability.query_metrics import (
    QueryMetricsCollector,
    QueryMetricsSnapshot,
)

__all__ = [
    "QueryMetricsCollector",
    "QueryMetricsSnapshot",
]
