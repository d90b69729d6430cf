"""Monotonic time measured from the first reading."""

from __future__ import annotations

import time
from typing import Callable, Optional

_NS_PER_SEC = 1_000_000_000.0


def ns_to_sec(ns: float) -> float:
    """Convert nanoseconds to seconds."""
    return ns / _NS_PER_SEC


def sec_to_ns(s: float) -> float:
    """Convert seconds to nanoseconds."""
    return s * _NS_PER_SEC


class Clock:
    """Elapsed time since the first reading of the clock."""

    def __init__(self, counter: Callable[[], int] = time.perf_counter_ns) -> None:
        self._counter = counter
        self._start: Optional[int] = None

    def ns(self) -> int:
        """Nanoseconds since the first call on this clock."""
        now = self._counter()
        if self._start is None:
            self._start = now
        return now - self._start

    def seconds(self) -> float:
        """Seconds since the first reading of this clock."""
        return ns_to_sec(self.ns())


_default_clock = Clock()


def time_ns() -> int:
    """Nanoseconds since the first reading of the shared clock."""
    return _default_clock.ns()


def time_s() -> float:
    """Seconds since the first reading of the shared clock."""
    return _default_clock.seconds()