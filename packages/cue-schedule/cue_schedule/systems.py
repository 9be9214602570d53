"""Named callback scheduler and its system factory."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cue_schedule.components import Delay, Periodic

if TYPE_CHECKING:
    from cue import Stage, TickContext

_Callback = Callable[["TickContext", str], None]


class Scheduler:
    """Holds named one-shot and recurring callbacks.

    Scheduling a name that is already pending replaces it. Cancelling an
    unknown name is a no-op.
    """

    def __init__(self) -> None:
        self._delays: dict[str, tuple[Delay, _Callback]] = {}
        self._periodics: dict[str, tuple[Periodic, _Callback]] = {}

    def after(self, name: str, seconds: float, callback: _Callback) -> None:
        delay = Delay(seconds)
        self.cancel(name)
        self._delays[name] = (delay, callback)

    def every(self, name: str, interval: float, callback: _Callback) -> None:
        periodic = Periodic(interval)
        self.cancel(name)
        self._periodics[name] = (periodic, callback)

    def cancel(self, name: str) -> bool:
        if self._delays.pop(name, None) is not None:
            return True
        entry = self._periodics.pop(name, None)
        if entry is None:
            return False
        entry[0].cancel()
        return True

    def pending(self, name: str) -> bool:
        return name in self._delays or name in self._periodics

    def names(self) -> list[str]:
        return [*self._delays, *self._periodics]

    def tick(self, ctx: TickContext) -> None:
        # Entries cancelled or replaced by an earlier callback this tick are skipped.
        for name, (delay, callback) in list(self._delays.items()):
            if self._delays.get(name, (None,))[0] is not delay:
                continue
            if delay.advance(ctx.dt):
                del self._delays[name]
                callback(ctx, name)

        for name, (periodic, callback) in list(self._periodics.items()):
            if self._periodics.get(name, (None,))[0] is not periodic:
                continue
            for _ in range(periodic.advance(ctx.dt)):
                if not periodic.running:
                    break
                callback(ctx, name)


def make_schedule_system(scheduler: Scheduler) -> Callable[[Stage, TickContext], None]:
    """Return a system that advances every pending delay and periodic."""

    def schedule_system(stage: Stage, ctx: TickContext) -> None:
        scheduler.tick(ctx)

    return schedule_system
