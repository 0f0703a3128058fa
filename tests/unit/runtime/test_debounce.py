"""Unit tests for debounce state and the quiet-interval gate."""

from __future__ import annotations

import pytest

from playdeck.runtime.debounce import Debouncer, DebounceState


class _FakeClock:
    """Clock fixture returning a settable nanosecond value."""

    def __init__(self, now: int = 1_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.mark.unit
def test_mark_is_strictly_increasing_even_with_frozen_clock() -> None:
    """Marks never compare equal and never roll backwards."""
    # Arrange
    clock = _FakeClock()
    state = DebounceState(clock)

    # Act
    first = state.mark()
    second = state.mark()
    clock.now = 0
    third = state.mark()

    # Assert
    assert first < second < third
    assert state.last_query_ns == third


@pytest.mark.unit
def test_is_superseded_only_after_newer_mark() -> None:
    """A ticket is stale only once a newer query is marked."""
    state = DebounceState(_FakeClock())
    ticket = state.mark()

    assert state.is_superseded(ticket) is False
    state.mark()
    assert state.is_superseded(ticket) is True


@pytest.mark.unit
def test_admit_sleeps_quiet_interval_then_checks_staleness() -> None:
    """The gate sleeps the configured interval before the check."""
    # Arrange
    state = DebounceState(_FakeClock())
    sleeps: list[float] = []
    debouncer = Debouncer(state, quiet_interval_ms=250, sleep=sleeps.append)
    ticket = state.mark()

    # Act
    admitted = debouncer.admit(ticket)

    # Assert
    assert admitted is True
    assert sleeps == [0.25]


@pytest.mark.unit
def test_admit_rejects_query_superseded_during_sleep() -> None:
    """A query marked during the sleep suppresses the older one."""
    state = DebounceState(_FakeClock())
    debouncer = Debouncer(state, sleep=lambda _seconds: state.mark())
    ticket = state.mark()

    assert debouncer.admit(ticket) is False


@pytest.mark.unit
def test_disabled_debouncer_admits_without_sleeping() -> None:
    """Disabled gating never sleeps and always admits."""
    state = DebounceState(_FakeClock())
    sleeps: list[float] = []
    debouncer = Debouncer(state, enabled=False, sleep=sleeps.append)
    ticket = state.mark()
    state.mark()

    assert debouncer.admit(ticket) is True
    assert sleeps == []
