"""cue-hover - Hover scaling and click-to-inspect movement for scene objects."""
from __future__ import annotations

from cue_hover.controller import HoverMoveController
from cue_hover.systems import make_hover_system
from cue_hover.types import FixedViewer, HoverConfig, HoverState

__all__ = [
    "HoverMoveController",
    "HoverConfig",
    "HoverState",
    "FixedViewer",
    "make_hover_system",
]
