"""Tween spec and handle."""
from __future__ import annotations

from dataclasses import dataclass, field

from cue import InvalidDuration

from cue_tween.easing import resolve

# Frame deltas summed in floating point land a hair short of round
# durations (ten 0.1s steps sum to 0.9999999999999999).
_EPSILON = 1e-9


@dataclass(frozen=True)
class TweenSpec:
    """Immutable description of one interpolation: start -> end over duration seconds."""

    start: float
    end: float
    duration: float
    easing: str = "linear"

    def __post_init__(self) -> None:
        if not self.duration > 0:
            raise InvalidDuration(self.duration)
        resolve(self.easing)

    def value_at(self, progress: float) -> float:
        p = min(max(progress, 0.0), 1.0)
        if p >= 1.0:
            return self.end
        return self.start + (self.end - self.start) * resolve(self.easing)(p)


@dataclass(frozen=True, slots=True)
class TweenStep:
    value: float
    done: bool


@dataclass
class Tween:
    """Mutable handle accumulating elapsed time against a :class:`TweenSpec`.

    Once complete, every further advance returns ``TweenStep(end, True)``.
    """

    spec: TweenSpec
    elapsed: float = field(default=0.0)

    @property
    def done(self) -> bool:
        return self.elapsed + _EPSILON >= self.spec.duration

    @property
    def progress(self) -> float:
        if self.done:
            return 1.0
        return max(self.elapsed / self.spec.duration, 0.0)

    @property
    def value(self) -> float:
        if self.done:
            return self.spec.end
        return self.spec.value_at(self.progress)

    def advance(self, dt: float) -> TweenStep:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self.done:
            self.elapsed += dt
        return TweenStep(self.value, self.done)


def create_tween(
    start: float, end: float, duration: float, easing: str = "linear"
) -> Tween:
    """Build a fresh tween. Raises InvalidDuration when duration <= 0."""
    return Tween(TweenSpec(start, end, duration, easing))


def advance(tween: Tween, dt: float) -> TweenStep:
    return tween.advance(dt)
