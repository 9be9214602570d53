"""HoverMoveController - scale on hover, move towards the viewer on click."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cue import PointerState, vec
from cue_tween import Tween, create_tween

from cue_hover.types import HoverConfig, HoverState

if TYPE_CHECKING:
    from cue import Target, Vec3
    from cue.interfaces import PositionSink, Viewer
    from cue_signal import SignalBus

logger = logging.getLogger(__name__)


class HoverMoveController:
    """Two-state toggle driving position and scale of one target.

    IDLE: hover scales the target up, leaving restores the original scale,
    clicking it activates and moves it in front of the viewer.
    ACTIVATED: hover and clicks on the target are ignored; a press that is
    neither over the interface nor over the target sends it back to the
    original position captured at construction.

    A new move restarts from wherever the target currently is; there is no
    blending between an interrupted move and the next one.
    """

    def __init__(
        self,
        target: Target,
        positions: PositionSink,
        viewer: Viewer,
        original_position: Vec3,
        original_scale: Vec3 = (1.0, 1.0, 1.0),
        config: HoverConfig | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._target = target
        self._positions = positions
        self._viewer = viewer
        self._original_position: Vec3 = tuple(original_position)
        self._original_scale: Vec3 = tuple(original_scale)
        self._config = config if config is not None else HoverConfig()
        self._bus = bus
        self._state = HoverState.IDLE
        self._position: Vec3 = self._original_position
        self._scale: Vec3 = self._original_scale
        self._move_from: Vec3 = self._original_position
        self._move_to: Vec3 | None = None
        self._tween: Tween | None = None

    # --- Queries ---

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def activated(self) -> bool:
        return self._state is HoverState.ACTIVATED

    @property
    def original_position(self) -> Vec3:
        return self._original_position

    @property
    def original_scale(self) -> Vec3:
        return self._original_scale

    @property
    def position(self) -> Vec3:
        return self._position

    @property
    def scale(self) -> Vec3:
        return self._scale

    @property
    def move_target(self) -> Vec3 | None:
        """Destination of the current move, or None when not moving."""
        return self._move_to

    @property
    def moving(self) -> bool:
        return self._tween is not None

    # --- Pointer events ---

    def pointer_enter(self) -> None:
        if self._state is HoverState.IDLE:
            self._set_scale(vec.scale(self._original_scale, self._config.hover_scale_factor))

    def pointer_exit(self) -> None:
        if self._state is HoverState.IDLE:
            self._set_scale(self._original_scale)

    def click(self) -> bool:
        """Primary press over the target. Returns True if it activated."""
        if self._state is not HoverState.IDLE:
            logger.debug("click on %r ignored: already activated", self._target)
            return False
        self._state = HoverState.ACTIVATED
        self._move(self._viewer_target())
        if self._bus is not None:
            self._bus.publish("hover_activated", target=self._target)
        return True

    def click_elsewhere(self, over_ui: bool = False, over_self: bool = False) -> bool:
        """Primary press anywhere. Returns True if it sent the target back."""
        if self._state is not HoverState.ACTIVATED or over_ui or over_self:
            return False
        self._state = HoverState.IDLE
        self._move(self._original_position)
        if self._bus is not None:
            self._bus.publish("hover_released", target=self._target)
        return True

    def handle_pointer(self, pointer: PointerState) -> None:
        """Dispatch one tick of polled pointer input."""
        if pointer.entered:
            self.pointer_enter()
        if pointer.exited:
            self.pointer_exit()
        if pointer.clicked and self.click():
            return
        if pointer.pressed:
            self.click_elsewhere(over_ui=pointer.over_ui, over_self=pointer.clicked)

    # --- Ticking ---

    def tick(self, dt: float) -> bool:
        """Advance the current move. Returns True while a move is in progress."""
        if self._tween is None or self._move_to is None:
            return False
        step = self._tween.advance(dt)
        if step.done:
            self._set_position(self._move_to)
            self._tween = None
            self._move_to = None
            return False
        self._set_position(vec.lerp(self._move_from, self._move_to, step.value))
        return True

    # --- Internal ---

    def _viewer_target(self) -> Vec3:
        distance = self._config.target_offset[2]
        return vec.add(self._viewer.position, vec.scale(self._viewer.forward, distance))

    def _move(self, destination: Vec3) -> None:
        logger.debug("moving %r from %s to %s", self._target, self._position, destination)
        self._move_from = self._position
        self._move_to = tuple(destination)
        self._tween = create_tween(
            0.0, 1.0, self._config.move_duration, self._config.easing
        )

    def _set_position(self, position: Vec3) -> None:
        self._position = position
        self._positions.set_position(self._target, position)

    def _set_scale(self, scale: Vec3) -> None:
        self._scale = scale
        self._positions.set_scale(self._target, scale)
