from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

_TICK = timedelta(microseconds=1)


def _wall_clock() -> datetime:
    return datetime.now(timezone.utc)


class MonotonicClock:
    """UTC clock whose readings strictly increase between calls.

    - Wraps a wall-clock source (``datetime.now(timezone.utc)`` by default).
    - When the source has not moved past the previous reading, returns the
      previous reading plus one microsecond, so readings follow call order.
    """

    def __init__(self, source: Optional[Callable[[], datetime]] = None) -> None:
        self._source = source or _wall_clock
        self._last: Optional[datetime] = None

    def now(self) -> datetime:
        current = self._source()
        if current.tzinfo is None:
            raise ValueError("Clock source must return timezone-aware datetimes")
        current = current.astimezone(timezone.utc)
        if self._last is not None and current <= self._last:
            current = self._last + _TICK
        self._last = current
        return current
