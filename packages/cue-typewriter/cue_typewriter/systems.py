"""System factory for typewriter engines."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cue_typewriter.engine import Typewriter

if TYPE_CHECKING:
    from cue import Stage, TickContext


def make_typewriter_system(typewriter: Typewriter) -> Callable[[Stage, TickContext], None]:
    """Return a system that ticks ``typewriter``. Start it before the first tick."""

    def typewriter_system(stage: Stage, ctx: TickContext) -> None:
        typewriter.tick(ctx.dt)

    return typewriter_system
