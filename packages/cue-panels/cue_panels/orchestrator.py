"""PanelOrchestrator - cycles panels behind a static-noise overlay."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from cue_schedule import Delay
from cue_tween import Tween, create_tween

from cue_panels.types import Gate, TransitionConfig, TransitionState

if TYPE_CHECKING:
    from cue import Target
    from cue.interfaces import DisplaySink, SoundSink
    from cue_signal import SignalBus

logger = logging.getLogger(__name__)

_OVERLAY_PHASES = (TransitionState.FADING_OVERLAY_IN, TransitionState.FADING_OVERLAY_OUT)
_PANEL_PHASES = (TransitionState.FADING_PANEL_OUT, TransitionState.FADING_PANEL_IN)


class PanelOrchestrator:
    """Runs one panel transition at a time as an explicit phase machine.

    Phase order: overlay in, panel out, delay, (advance index), panel in,
    overlay out. Phase timing never depends on whether the overlay target
    exists; a missing overlay only skips its visual updates. With no panels
    the panel fades and the index advance are skipped.

    Signals published (when a bus is given):
        ``button_press`` (panel) when a transition starts,
        ``transition_phase`` (old, new) on every phase change,
        ``transition_finished`` (panel) when the pipeline returns to idle.
    """

    def __init__(
        self,
        panels: Iterable[Target],
        display: DisplaySink,
        config: TransitionConfig | None = None,
        overlay: Target | None = None,
        sound: SoundSink | None = None,
        press_clip: Target | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._panels: tuple[Target, ...] = tuple(panels)
        self._display = display
        self._config = config if config is not None else TransitionConfig()
        self._overlay = overlay
        self._sound = sound
        self._press_clip = press_clip
        self._bus = bus
        self._gates: dict[Target, Gate] = {}
        self._index = 0
        self._state = TransitionState.IDLE
        self._tween: Tween | None = None
        self._delay: Delay | None = None

        for i, panel in enumerate(self._panels):
            self._display.set_active(panel, i == 0)
            self._set_interactable(panel, i == 0)
        if self._overlay is not None:
            self._display.set_active(self._overlay, False)

    # --- Queries ---

    @property
    def state(self) -> TransitionState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._state is not TransitionState.IDLE

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_panel(self) -> Target | None:
        if not self._panels:
            return None
        return self._panels[self._index]

    @property
    def panels(self) -> tuple[Target, ...]:
        return self._panels

    @property
    def config(self) -> TransitionConfig:
        return self._config

    def gate(self, panel: Target) -> Gate:
        """Return the gate for ``panel``, creating it on first access."""
        gate = self._gates.get(panel)
        if gate is None:
            gate = Gate()
            self._gates[panel] = gate
        return gate

    def gates(self) -> dict[Target, Gate]:
        return dict(self._gates)

    # --- Operations ---

    def trigger_transition(self) -> bool:
        """Start a transition. Returns False (and does nothing) while one runs."""
        if self.in_flight:
            logger.debug("trigger ignored: transition in flight (%s)", self._state.value)
            return False

        if self._bus is not None:
            self._bus.publish("button_press", panel=self._index)
        if self._sound is not None and self._press_clip is not None:
            self._sound.play_one_shot(self._press_clip)

        self._enter(self._next(TransitionState.IDLE))
        return True

    def tick(self, dt: float) -> bool:
        """Advance the running transition by ``dt``. Returns True when idle."""
        if self._state is TransitionState.IDLE:
            return True

        if self._tween is not None:
            step = self._tween.advance(dt)
            self._apply(step.value)
            finished = step.done
        else:
            assert self._delay is not None
            finished = self._delay.advance(dt)

        if finished:
            self._exit(self._state)
            self._enter(self._next(self._state))
        return self._state is TransitionState.IDLE

    # --- Phase machine ---

    def _next(self, state: TransitionState) -> TransitionState:
        has_panels = bool(self._panels)
        overlay = self._config.overlay_enabled
        if state is TransitionState.IDLE:
            if overlay:
                return TransitionState.FADING_OVERLAY_IN
            state = TransitionState.FADING_OVERLAY_IN
        if state is TransitionState.FADING_OVERLAY_IN:
            return TransitionState.FADING_PANEL_OUT if has_panels else TransitionState.DELAYING
        if state is TransitionState.FADING_PANEL_OUT:
            return TransitionState.DELAYING
        if state is TransitionState.DELAYING and has_panels:
            return TransitionState.FADING_PANEL_IN
        if state in (TransitionState.DELAYING, TransitionState.FADING_PANEL_IN):
            return TransitionState.FADING_OVERLAY_OUT if overlay else TransitionState.IDLE
        return TransitionState.IDLE

    def _enter(self, state: TransitionState) -> None:
        old = self._state
        self._state = state
        self._tween = None
        self._delay = None
        cfg = self._config
        logger.debug("transition phase %s -> %s", old.value, state.value)

        if state is TransitionState.FADING_OVERLAY_IN:
            if self._overlay is not None:
                self._display.set_active(self._overlay, True)
                self._display.set_opacity(self._overlay, 0.0)
            self._tween = create_tween(0.0, 1.0, cfg.static_transition_duration)
        elif state is TransitionState.FADING_PANEL_OUT:
            self._set_gate_opacity(self._panels[self._index], 1.0)
            self._tween = create_tween(1.0, 0.0, cfg.transition_duration)
        elif state is TransitionState.DELAYING:
            self._delay = Delay(cfg.delay)
        elif state is TransitionState.FADING_PANEL_IN:
            panel = self._panels[self._index]
            self._display.set_active(panel, True)
            self._set_interactable(panel, True)
            self._set_gate_opacity(panel, 0.0)
            self._tween = create_tween(0.0, 1.0, cfg.transition_duration)
        elif state is TransitionState.FADING_OVERLAY_OUT:
            self._tween = create_tween(1.0, 0.0, cfg.static_transition_duration)

        if self._bus is not None:
            self._bus.publish("transition_phase", old=old.value, new=state.value)
            if state is TransitionState.IDLE:
                self._bus.publish("transition_finished", panel=self._index)

    def _exit(self, state: TransitionState) -> None:
        if state is TransitionState.FADING_PANEL_OUT:
            panel = self._panels[self._index]
            self._display.set_active(panel, False)
            self._set_interactable(panel, False)
        elif state is TransitionState.DELAYING and self._panels:
            self._index = (self._index + 1) % len(self._panels)
        elif state is TransitionState.FADING_OVERLAY_OUT and self._overlay is not None:
            self._display.set_active(self._overlay, False)

    def _apply(self, value: float) -> None:
        if self._state in _OVERLAY_PHASES:
            if self._overlay is not None:
                self._display.set_opacity(self._overlay, value)
        elif self._state in _PANEL_PHASES:
            self._set_gate_opacity(self._panels[self._index], value)

    # --- Gates ---

    def _set_interactable(self, panel: Target, interactable: bool) -> None:
        gate = self.gate(panel)
        gate.interactable = interactable
        gate.blocks_input = interactable
        self._display.set_interactable(panel, interactable, interactable)

    def _set_gate_opacity(self, panel: Target, value: float) -> None:
        self.gate(panel).opacity = value
        self._display.set_opacity(panel, value)
