"""Slideshow - fades a single image target through a sequence of images."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from cue_schedule import Delay
from cue_tween import Tween, create_tween

from cue_panels.types import SlideshowConfig, SlideState

if TYPE_CHECKING:
    from cue import Target
    from cue.interfaces import DisplaySink
    from cue_signal import SignalBus

logger = logging.getLogger(__name__)


class Slideshow:
    """Cycle: fade out, swap image, fade in, hold, advance. Repeats until stopped."""

    def __init__(
        self,
        target: Target,
        images: Iterable[Target],
        display: DisplaySink,
        config: SlideshowConfig | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._target = target
        self._images: tuple[Target, ...] = tuple(images)
        self._display = display
        self._config = config if config is not None else SlideshowConfig()
        self._bus = bus
        self._index = 0
        self._state = SlideState.STOPPED
        self._tween: Tween | None = None
        self._delay: Delay | None = None

    @property
    def state(self) -> SlideState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is not SlideState.STOPPED

    @property
    def image_index(self) -> int:
        return self._index

    def start(self) -> bool:
        if self.running:
            return False
        if not self._images:
            logger.debug("slideshow %r has no images; not starting", self._target)
            return False
        self._enter(SlideState.FADING_OUT)
        return True

    def stop(self) -> None:
        self._state = SlideState.STOPPED
        self._tween = None
        self._delay = None

    def tick(self, dt: float) -> bool:
        """Advance by ``dt``. Returns True while the slideshow is running."""
        if self._state is SlideState.STOPPED:
            return False

        if self._tween is not None:
            step = self._tween.advance(dt)
            self._display.set_opacity(self._target, step.value)
            finished = step.done
        else:
            assert self._delay is not None
            finished = self._delay.advance(dt)

        if finished:
            if self._state is SlideState.FADING_OUT:
                self._display.set_image(self._target, self._images[self._index])
                self._enter(SlideState.FADING_IN)
            elif self._state is SlideState.FADING_IN:
                self._enter(SlideState.HOLDING)
            else:
                self._index = (self._index + 1) % len(self._images)
                if self._bus is not None:
                    self._bus.publish("slide_advanced", target=self._target, index=self._index)
                self._enter(SlideState.FADING_OUT)
        return True

    def _enter(self, state: SlideState) -> None:
        self._state = state
        self._tween = None
        self._delay = None
        fade = self._config.fade_duration
        if state is SlideState.FADING_OUT:
            self._tween = create_tween(1.0, 0.0, fade)
        elif state is SlideState.FADING_IN:
            self._tween = create_tween(0.0, 1.0, fade)
        elif state is SlideState.HOLDING:
            self._delay = Delay(self._config.display_time)
