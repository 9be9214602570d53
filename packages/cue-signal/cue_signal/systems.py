"""System factory for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cue_signal.bus import SignalBus

if TYPE_CHECKING:
    from cue import Stage, TickContext


def make_signal_system(bus: SignalBus) -> Callable[[Stage, TickContext], None]:
    """Return a system that flushes ``bus``. Register it last."""

    def signal_system(stage: Stage, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
