"""Collaborator protocols the sequencing core calls into.

Everything here is structural: any object with matching methods works, the
in-memory :class:`cue.stage.Stage` included.
"""

from __future__ import annotations

from typing import Protocol

from cue.types import PointerState, Target, Vec3


class TimeSource(Protocol):
    def delta_time(self) -> float: ...


class DisplaySink(Protocol):
    def set_opacity(self, target: Target, value: float) -> None: ...

    def set_active(self, target: Target, active: bool) -> None: ...

    def set_text(self, target: Target, text: str) -> None: ...

    def set_interactable(
        self, target: Target, interactable: bool, blocks_input: bool
    ) -> None: ...

    def set_image(self, target: Target, image: Target) -> None: ...


class InputSource(Protocol):
    def is_trigger_pressed(self) -> bool: ...

    def pointer_state(self, target: Target) -> PointerState: ...


class SoundSink(Protocol):
    def play_one_shot(self, clip: Target) -> None: ...


class PositionSink(Protocol):
    def set_position(self, target: Target, position: Vec3) -> None: ...

    def set_scale(self, target: Target, scale: Vec3) -> None: ...


class Viewer(Protocol):
    """Camera-like object the hover controller moves things towards."""

    @property
    def position(self) -> Vec3: ...

    @property
    def forward(self) -> Vec3: ...
