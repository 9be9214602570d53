"""System factories for panel transitions, slideshows and reveals."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cue_panels.orchestrator import PanelOrchestrator
from cue_panels.reveal import RevealLatch
from cue_panels.slideshow import Slideshow

if TYPE_CHECKING:
    from cue import Stage, TickContext


def make_panel_system(
    orchestrator: PanelOrchestrator,
    trigger: Callable[[], bool] | None = None,
) -> Callable[[Stage, TickContext], None]:
    """Return a system that polls ``trigger`` and ticks ``orchestrator``.

    A trigger seen while a transition is in flight is dropped, not queued.
    """

    def panel_system(stage: Stage, ctx: TickContext) -> None:
        if trigger is not None and trigger():
            orchestrator.trigger_transition()
        orchestrator.tick(ctx.dt)

    return panel_system


def make_slideshow_system(slideshow: Slideshow) -> Callable[[Stage, TickContext], None]:
    def slideshow_system(stage: Stage, ctx: TickContext) -> None:
        slideshow.tick(ctx.dt)

    return slideshow_system


def make_reveal_system(
    latch: RevealLatch,
    pressed: Callable[[], bool],
    on_reveal: Callable[[], None] | None = None,
) -> Callable[[Stage, TickContext], None]:
    def reveal_system(stage: Stage, ctx: TickContext) -> None:
        if pressed() and latch.reveal() and on_reveal is not None:
            on_reveal()

    return reveal_system
