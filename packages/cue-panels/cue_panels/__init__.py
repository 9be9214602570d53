"""cue-panels - Panel transitions, slideshows and reveals for the cue engine."""
from __future__ import annotations

from cue_panels.orchestrator import PanelOrchestrator
from cue_panels.reveal import RevealLatch
from cue_panels.slideshow import Slideshow
from cue_panels.systems import make_panel_system, make_reveal_system, make_slideshow_system
from cue_panels.types import Gate, SlideshowConfig, SlideState, TransitionConfig, TransitionState

__all__ = [
    "PanelOrchestrator",
    "TransitionConfig",
    "TransitionState",
    "Gate",
    "Slideshow",
    "SlideshowConfig",
    "SlideState",
    "RevealLatch",
    "make_panel_system",
    "make_slideshow_system",
    "make_reveal_system",
]
