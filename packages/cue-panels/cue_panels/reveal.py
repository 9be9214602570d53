"""RevealLatch - one-shot reveal of a hidden canvas and its light."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cue import Target
    from cue.interfaces import DisplaySink
    from cue_signal import SignalBus

logger = logging.getLogger(__name__)


class RevealLatch:
    """Hides ``canvas`` and ``light`` on construction; :meth:`reveal` shows them once.

    When ``animated`` is set, revealing publishes ``animation_trigger`` with
    the target and trigger name so an animation host can play it.
    """

    def __init__(
        self,
        display: DisplaySink,
        canvas: Target,
        light: Target | None = None,
        animated: Target | None = None,
        trigger_name: str = "PlayAnimation",
        bus: SignalBus | None = None,
    ) -> None:
        self._display = display
        self._canvas = canvas
        self._light = light
        self._animated = animated
        self._trigger_name = trigger_name
        self._bus = bus
        self._revealed = False

        self._display.set_active(canvas, False)
        if light is not None:
            self._display.set_active(light, False)

    @property
    def revealed(self) -> bool:
        return self._revealed

    def reveal(self) -> bool:
        if self._revealed:
            logger.debug("reveal ignored: %r already shown", self._canvas)
            return False
        self._revealed = True
        self._display.set_active(self._canvas, True)
        if self._light is not None:
            self._display.set_active(self._light, True)
        if self._animated is not None and self._bus is not None:
            self._bus.publish(
                "animation_trigger", target=self._animated, trigger=self._trigger_name
            )
        return True
