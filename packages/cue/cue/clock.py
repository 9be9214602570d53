"""Clock, TickContext factory and time sources."""

import time
from typing import Callable

from cue.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._last_dt = 0.0
        self._tick_number = 0
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        """Nominal step length used for pacing and as the default delta."""
        return self._dt

    @property
    def last_dt(self) -> float:
        return self._last_dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._dt
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._tick_number += 1
        self._last_dt = dt
        self._elapsed += dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )


class FixedTimeSource:
    """Reports the same delta every tick. Deterministic; used by tests."""

    def __init__(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._dt = dt

    def delta_time(self) -> float:
        return self._dt


class MonotonicTimeSource:
    """Reports wall-clock seconds since the previous call.

    The first call returns 0.0 so a freshly created source never produces a
    huge initial frame.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last: float | None = None

    def delta_time(self) -> float:
        now = self._clock()
        if self._last is None:
            self._last = now
            return 0.0
        dt = now - self._last
        self._last = now
        return max(dt, 0.0)
