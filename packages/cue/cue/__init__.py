"""cue - A small host-driven tick engine for interactive scene scripting."""

from cue.clock import Clock, FixedTimeSource, MonotonicTimeSource
from cue.engine import Engine
from cue.stage import Node, Stage
from cue.types import (
    ConfigurationError,
    InvalidDuration,
    PointerState,
    Target,
    TickContext,
    Vec3,
)

__all__ = [
    "Engine",
    "Stage",
    "Node",
    "Clock",
    "FixedTimeSource",
    "MonotonicTimeSource",
    "TickContext",
    "PointerState",
    "Target",
    "Vec3",
    "ConfigurationError",
    "InvalidDuration",
]
