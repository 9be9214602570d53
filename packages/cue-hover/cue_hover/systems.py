"""System factory for hover/click controllers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cue_hover.controller import HoverMoveController

if TYPE_CHECKING:
    from cue import PointerState, Stage, TickContext


def make_hover_system(
    controller: HoverMoveController,
    pointer: Callable[[], PointerState] | None = None,
) -> Callable[[Stage, TickContext], None]:
    """Return a system that feeds polled pointer input to ``controller`` and ticks it."""

    def hover_system(stage: Stage, ctx: TickContext) -> None:
        if pointer is not None:
            controller.handle_pointer(pointer())
        controller.tick(ctx.dt)

    return hover_system
