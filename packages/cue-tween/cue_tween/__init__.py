"""cue-tween - Time-based value interpolation driven by frame deltas."""
from __future__ import annotations

from cue_tween.components import Tween, TweenSpec, TweenStep, advance, create_tween
from cue_tween.easing import EASINGS

__all__ = ["Tween", "TweenSpec", "TweenStep", "advance", "create_tween", "EASINGS"]
