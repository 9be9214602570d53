"""cue-schedule - Delay, periodic and named-callback scheduling for the cue engine."""
from __future__ import annotations

from cue_schedule.components import Delay, Periodic
from cue_schedule.systems import Scheduler, make_schedule_system

__all__ = ["Delay", "Periodic", "Scheduler", "make_schedule_system"]
