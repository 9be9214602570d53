"""cue-typewriter - Typewriter text cycling with a blinking cursor."""
from __future__ import annotations

from cue_typewriter.blink import BlinkProcess
from cue_typewriter.engine import Typewriter
from cue_typewriter.systems import make_typewriter_system
from cue_typewriter.types import TypewriterConfig, TypewriterPhase

__all__ = [
    "Typewriter",
    "TypewriterConfig",
    "TypewriterPhase",
    "BlinkProcess",
    "make_typewriter_system",
]
