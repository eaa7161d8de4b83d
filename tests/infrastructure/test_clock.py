from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.infrastructure.clock import MonotonicClock


def test_clock_readings_are_utc_and_increasing() -> None:
    clock = MonotonicClock()
    readings = [clock.now() for _ in range(50)]
    assert all(r.tzinfo is not None for r in readings)
    assert all(a < b for a, b in zip(readings, readings[1:]))


def test_clock_advances_when_source_is_stuck() -> None:
    fixed = datetime(2024, 6, 1, 20, 0, tzinfo=timezone.utc)
    clock = MonotonicClock(lambda: fixed)
    first, second = clock.now(), clock.now()
    assert first == fixed
    assert second == fixed + timedelta(microseconds=1)


def test_clock_never_goes_backwards() -> None:
    t0 = datetime(2024, 6, 1, 20, 0, tzinfo=timezone.utc)
    values = iter([t0, t0 - timedelta(seconds=5), t0 + timedelta(seconds=1)])
    clock = MonotonicClock(lambda: next(values))
    a, b, c = clock.now(), clock.now(), clock.now()
    assert a < b < c
    assert c == t0 + timedelta(seconds=1)


def test_clock_rejects_naive_source() -> None:
    clock = MonotonicClock(lambda: datetime(2024, 6, 1))
    with pytest.raises(ValueError):
        clock.now()
