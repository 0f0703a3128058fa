"""Unit tests for query performance counters and the local host."""

from __future__ import annotations

from pathlib import Path

import pytest

from playdeck.observability import QueryMetricsCollector
from playdeck.runtime.host import LocalHost
from tests.unit.helpers import RecordingClient, build_dispatcher


@pytest.mark.unit
def test_snapshot_averages_recorded_durations() -> None:
    """Average query time is the rounded mean of recorded durations."""
    metrics = QueryMetricsCollector()
    metrics.record_query(duration_ms=10.0)
    metrics.record_query(duration_ms=21.0)

    snapshot = metrics.snapshot()

    assert snapshot.query_count == 2
    assert snapshot.average_query_time_ms == 16


@pytest.mark.unit
def test_empty_snapshot_average_is_zero() -> None:
    """No queries yields a zero average."""
    assert QueryMetricsCollector().snapshot().average_query_time_ms == 0


@pytest.mark.unit
def test_reset_clears_counters() -> None:
    """Reset returns counters to zero."""
    metrics = QueryMetricsCollector()
    metrics.record_query(duration_ms=5.0)

    metrics.reset()

    assert metrics.snapshot().query_count == 0


@pytest.mark.unit
def test_local_host_counts_dispatches_for_diag(tmp_path: Path) -> None:
    """Queries run through the host are visible to `diag`."""
    # Arrange
    host = LocalHost(tmp_path)
    dispatcher = build_dispatcher(RecordingClient(), host=host)

    # Act
    host.run_query(dispatcher, "play")
    host.run_query(dispatcher, "pause")
    results = host.run_query(dispatcher, "diag")

    # Assert
    assert results is not None
    assert results[0].title == "Query Count: 2"
    assert results[0].subtitle.startswith("Avg. Query Time: ")
    assert host.query_count == 3
    assert host.plugin_directory == tmp_path
