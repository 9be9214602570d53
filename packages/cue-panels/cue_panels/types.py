"""Core data types for panel transitions and slideshows."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cue import InvalidDuration


class TransitionState(Enum):
    IDLE = "idle"
    FADING_OVERLAY_IN = "fading_overlay_in"
    FADING_PANEL_OUT = "fading_panel_out"
    DELAYING = "delaying"
    FADING_PANEL_IN = "fading_panel_in"
    FADING_OVERLAY_OUT = "fading_overlay_out"


class SlideState(Enum):
    STOPPED = "stopped"
    FADING_OUT = "fading_out"
    FADING_IN = "fading_in"
    HOLDING = "holding"


@dataclass
class Gate:
    """Per-panel opacity and input gate, independent of the active flag."""

    opacity: float = 1.0
    interactable: bool = True
    blocks_input: bool = True


@dataclass(frozen=True)
class TransitionConfig:
    """Timing for one panel transition.

    Attributes:
        transition_duration: Seconds for each panel fade (out and in).
        static_transition_duration: Seconds for each overlay fade.
        delay_ratio: Pause between panels as a fraction of transition_duration.
        overlay_enabled: False drops both overlay phases from the pipeline,
            giving the plain fade-out/fade-in variant.
    """

    transition_duration: float = 1.0
    static_transition_duration: float = 0.5
    delay_ratio: float = 0.1
    overlay_enabled: bool = True

    def __post_init__(self) -> None:
        if not self.transition_duration > 0:
            raise InvalidDuration(self.transition_duration)
        if not self.static_transition_duration > 0:
            raise InvalidDuration(self.static_transition_duration)
        if self.delay_ratio < 0:
            raise ValueError(f"delay_ratio must be >= 0, got {self.delay_ratio}")

    @property
    def delay(self) -> float:
        return self.transition_duration * self.delay_ratio


@dataclass(frozen=True)
class SlideshowConfig:
    display_time: float = 3.0
    fade_duration: float = 0.5

    def __post_init__(self) -> None:
        if self.display_time < 0:
            raise ValueError(f"display_time must be >= 0, got {self.display_time}")
        if not self.fade_duration > 0:
            raise InvalidDuration(self.fade_duration)
