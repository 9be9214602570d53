"""Delay and Periodic timing primitives measured in seconds."""
from __future__ import annotations

from dataclasses import dataclass

from cue import InvalidDuration

_EPSILON = 1e-9


@dataclass
class Delay:
    """One-shot countdown. Done once ``remaining`` reaches 0, stays done.

    A zero-length delay is allowed and completes on the first advance.
    """

    remaining: float

    def __post_init__(self) -> None:
        if self.remaining < 0:
            raise ValueError(f"delay must be >= 0, got {self.remaining}")

    @property
    def done(self) -> bool:
        return self.remaining <= _EPSILON

    def advance(self, dt: float) -> bool:
        """Consume ``dt`` seconds. Returns True once the delay has elapsed."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self.done:
            self.remaining -= dt
        return self.done


@dataclass
class Periodic:
    """Recurring timer firing every ``interval`` seconds until cancelled."""

    interval: float
    elapsed: float = 0.0
    running: bool = True

    def __post_init__(self) -> None:
        if not self.interval > 0:
            raise InvalidDuration(self.interval)

    def advance(self, dt: float) -> int:
        """Consume ``dt`` seconds. Returns how many times the timer fired."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self.running:
            return 0
        self.elapsed += dt
        fired = 0
        while self.elapsed + _EPSILON >= self.interval:
            self.elapsed -= self.interval
            fired += 1
        return fired

    def cancel(self) -> bool:
        """Stop the timer. Returns False if it was already stopped."""
        if not self.running:
            return False
        self.running = False
        self.elapsed = 0.0
        return True
