"""Typewriter phases and configuration."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cue import InvalidDuration


class TypewriterPhase(Enum):
    STOPPED = "stopped"
    STARTING = "starting"
    TYPING = "typing"
    HOLDING = "holding"
    DELETING = "deleting"
    ADVANCING = "advancing"


@dataclass(frozen=True)
class TypewriterConfig:
    """Timing for the type/hold/delete cycle. All values in seconds.

    Attributes:
        start_delay: Pause before the first string starts typing.
        type_speed: Wait after each typed character.
        delete_speed: Wait after each deleted character.
        stay_duration: How long a fully typed string is held.
        cursor_blink_rate: Interval between cursor toggles while holding.
        advance_delay: Pause on an empty line before the next string.
        cursor: Glyph appended to in-progress text.
    """

    start_delay: float = 1.0
    type_speed: float = 0.05
    delete_speed: float = 0.03
    stay_duration: float = 1.5
    cursor_blink_rate: float = 0.5
    advance_delay: float = 0.5
    cursor: str = "|"

    def __post_init__(self) -> None:
        for name in ("start_delay", "type_speed", "delete_speed", "stay_duration", "advance_delay"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if not self.cursor_blink_rate > 0:
            raise InvalidDuration(self.cursor_blink_rate)
