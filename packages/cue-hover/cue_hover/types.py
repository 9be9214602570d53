"""Hover controller state and configuration."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cue import Vec3


class HoverState(Enum):
    IDLE = "idle"
    ACTIVATED = "activated"


@dataclass(frozen=True)
class HoverConfig:
    """Attributes:
        hover_scale_factor: Scale multiplier applied while hovered in IDLE.
        move_speed: Reciprocal of the move duration (5.0 moves in 0.2s).
        target_offset: Offset from the viewer; only ``z`` (distance along the
            viewer's forward axis) is used.
        easing: Easing curve for the move.
    """

    hover_scale_factor: float = 1.1
    move_speed: float = 5.0
    target_offset: Vec3 = (0.0, 0.0, 2.0)
    easing: str = "linear"

    def __post_init__(self) -> None:
        if not self.move_speed > 0:
            raise ValueError(f"move_speed must be > 0, got {self.move_speed}")

    @property
    def move_duration(self) -> float:
        return 1.0 / self.move_speed


@dataclass(frozen=True)
class FixedViewer:
    """Viewer with a fixed pose, for hosts without a camera object."""

    position: Vec3 = (0.0, 0.0, 0.0)
    forward: Vec3 = (0.0, 0.0, 1.0)
