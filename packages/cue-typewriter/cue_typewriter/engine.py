"""Typewriter - endless type, hold, delete, advance cycle over a list of strings."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from cue import ConfigurationError
from cue_schedule import Delay

from cue_typewriter.blink import BlinkProcess
from cue_typewriter.types import TypewriterConfig, TypewriterPhase

if TYPE_CHECKING:
    from cue import Target
    from cue.interfaces import DisplaySink, SoundSink
    from cue_signal import SignalBus

logger = logging.getLogger(__name__)


class Typewriter:
    """Explicit state machine replacing a wait-driven typing loop.

    Each tick consumes ``dt`` against the current wait; when the wait runs
    out the next step runs and arms the following wait on the same tick.
    The cycle has no terminal phase; it runs until :meth:`stop`.

    Per tick the main phase is advanced first. The blink process is ticked
    afterwards, and only if it was running before the main phase advanced
    and still is, so a hold that ends on this tick cancels the blink before
    it can toggle again.
    """

    def __init__(
        self,
        texts: Iterable[str],
        display: DisplaySink | None,
        target: Target | None,
        sound: SoundSink | None = None,
        clip: Target | None = None,
        config: TypewriterConfig | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._texts: tuple[str, ...] = tuple(texts)
        self._display = display
        self._target = target
        self._sound = sound
        self._clip = clip
        self._config = config if config is not None else TypewriterConfig()
        self._bus = bus
        self._phase = TypewriterPhase.STOPPED
        self._index = 0
        self._char = 0
        self._text = ""
        self._wait = Delay(0.0)
        self._blink: BlinkProcess | None = None

    # --- Queries ---

    @property
    def phase(self) -> TypewriterPhase:
        return self._phase

    @property
    def running(self) -> bool:
        return self._phase is not TypewriterPhase.STOPPED

    @property
    def text_index(self) -> int:
        return self._index

    @property
    def text(self) -> str:
        """Text most recently written by this engine (blink toggles included)."""
        return self._text

    @property
    def cursor_visible(self) -> bool:
        return self._blink.cursor_visible if self._blink is not None else True

    @property
    def blink(self) -> BlinkProcess | None:
        return self._blink

    @property
    def config(self) -> TypewriterConfig:
        return self._config

    # --- Lifecycle ---

    def start(self) -> bool:
        """Begin the cycle. Raises ConfigurationError if anything is missing."""
        if self.running:
            return False

        missing = []
        if not self._texts:
            missing.append("texts")
        if self._display is None:
            missing.append("display")
        if self._target is None:
            missing.append("target")
        if self._sound is None:
            missing.append("sound")
        if self._clip is None:
            missing.append("clip")
        if missing:
            logger.error(
                "typewriter %r not started; missing: %s", self._target, ", ".join(missing)
            )
            raise ConfigurationError(f"typewriter requires: {', '.join(missing)}")

        assert self._display is not None
        self._blink = BlinkProcess(
            self._display, self._target, self._config.cursor_blink_rate, self._config.cursor
        )
        self._index = 0
        self._phase = TypewriterPhase.STARTING
        self._wait = Delay(self._config.start_delay)
        return True

    def stop(self) -> None:
        if self._blink is not None:
            self._blink.cancel()
        self._phase = TypewriterPhase.STOPPED

    def tick(self, dt: float) -> bool:
        """Advance by ``dt``. Returns True while the engine is running."""
        if not self.running:
            return False
        assert self._blink is not None

        blink_was_running = self._blink.running
        if self._wait.advance(dt):
            self._step()
        if blink_was_running and self._blink.running:
            self._blink.tick(dt)
            self._text = self._blink_text()
        return True

    # --- Phase machine ---

    def _step(self) -> None:
        phase = self._phase
        line = self._texts[self._index]

        if phase is TypewriterPhase.STARTING:
            self._begin_typing()
        elif phase is TypewriterPhase.TYPING:
            self._char += 1
            if self._char <= len(line):
                self._type_char(line)
            else:
                self._phase = TypewriterPhase.HOLDING
                assert self._blink is not None
                self._blink.start(line)
                self._text = self._blink_text()
                self._wait = Delay(self._config.stay_duration)
        elif phase is TypewriterPhase.HOLDING:
            assert self._blink is not None
            self._blink.cancel()
            self._phase = TypewriterPhase.DELETING
            self._char = len(line)
            self._show(line[: self._char] + self._config.cursor)
            self._wait = Delay(self._config.delete_speed)
        elif phase is TypewriterPhase.DELETING:
            self._char -= 1
            if self._char >= 0:
                self._show(line[: self._char] + self._config.cursor)
                self._wait = Delay(self._config.delete_speed)
            else:
                self._phase = TypewriterPhase.ADVANCING
                self._show("")
                self._wait = Delay(self._config.advance_delay)
        elif phase is TypewriterPhase.ADVANCING:
            self._index = (self._index + 1) % len(self._texts)
            logger.debug("typewriter %r advancing to text %d", self._target, self._index)
            if self._bus is not None:
                self._bus.publish("text_advanced", target=self._target, index=self._index)
            self._begin_typing()

    def _begin_typing(self) -> None:
        self._phase = TypewriterPhase.TYPING
        self._char = 0
        self._type_char(self._texts[self._index])

    def _type_char(self, line: str) -> None:
        self._show(line[: self._char] + self._config.cursor)
        assert self._sound is not None
        self._sound.play_one_shot(self._clip)
        self._wait = Delay(self._config.type_speed)

    def _show(self, text: str) -> None:
        self._text = text
        assert self._display is not None
        self._display.set_text(self._target, text)

    def _blink_text(self) -> str:
        assert self._blink is not None
        line = self._texts[self._index]
        if self._blink.cursor_visible:
            return line + self._config.cursor
        return line
