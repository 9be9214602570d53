"""Engine - host-driven loop, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from cue.clock import Clock, FixedTimeSource
from cue.interfaces import TimeSource
from cue.stage import Stage
from cue.types import System, TickContext

logger = logging.getLogger(__name__)


class Engine:
    """Runs registered systems once per tick.

    Time only moves when the host calls :meth:`step` (or one of the run
    loops). The delta for a tick is either passed in explicitly or read from
    the configured :class:`~cue.interfaces.TimeSource`.
    """

    def __init__(
        self,
        tps: int = 60,
        time_source: TimeSource | None = None,
        stage: Stage | None = None,
    ) -> None:
        self._clock = Clock(tps)
        self._stage = stage if stage is not None else Stage()
        self._time_source = (
            time_source if time_source is not None else FixedTimeSource(self._clock.dt)
        )
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[Stage, TickContext], None]] = []
        self._stop_hooks: list[Callable[[Stage, TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[Stage, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Stage, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None) -> None:
        if dt is None:
            dt = self._time_source.delta_time()
        self._clock.advance(dt)
        self._stage._sync_tick(self._clock.tick_number)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._stage, ctx)
            if self._stop_requested:
                break

    def step(self, dt: float | None = None) -> None:
        self._stop_requested = False
        self._tick(dt)

    def _run_hooks(self, hooks: list[Callable[[Stage, TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._stage, ctx)

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._tick(None)
            if self._stop_requested:
                logger.debug("stop requested at tick %d", self._clock.tick_number)
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick(None)
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.debug("stopped at tick %d", self._clock.tick_number)
        self._run_hooks(self._stop_hooks)
