"""cue-signal - In-process event bus flushed once per tick."""
from __future__ import annotations

from cue_signal.bus import ANY, SignalBus
from cue_signal.systems import make_signal_system

__all__ = ["ANY", "SignalBus", "make_signal_system"]
