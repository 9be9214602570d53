"""Shared type aliases, value types and errors for the cue engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Hashable

Target = Hashable
Vec3 = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


@dataclass(frozen=True, slots=True)
class PointerState:
    """Pointer input for one target during one tick.

    ``clicked`` is a primary press over the target itself, ``pressed`` is a
    primary press anywhere, ``over_ui`` is True when the pointer is over an
    interface element.
    """

    entered: bool = False
    exited: bool = False
    clicked: bool = False
    pressed: bool = False
    over_ui: bool = False


class ConfigurationError(Exception):
    """Raised when a required collaborator or resource is missing at start."""


class InvalidDuration(ValueError):
    """Raised when a timed primitive is built with a non-positive duration."""

    def __init__(self, duration: float) -> None:
        self.duration = duration
        super().__init__(f"duration must be > 0, got {duration}")


if TYPE_CHECKING:
    from cue.stage import Stage

System = Callable[["Stage", TickContext], None]
