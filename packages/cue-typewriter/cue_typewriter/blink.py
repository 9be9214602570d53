"""BlinkProcess - cancellable cursor toggle run while a line is held."""
from __future__ import annotations

from typing import TYPE_CHECKING

from cue_schedule import Periodic

if TYPE_CHECKING:
    from cue import Target
    from cue.interfaces import DisplaySink


class BlinkProcess:
    """Flips the displayed text between ``text + cursor`` and ``text``.

    Starting flips immediately, hiding the cursor that typing left on
    display; further flips follow every ``rate`` seconds. Cancelling a
    process that is not running is a no-op.
    """

    def __init__(
        self, display: DisplaySink, target: Target, rate: float, cursor: str = "|"
    ) -> None:
        self._display = display
        self._target = target
        self._rate = rate
        self._cursor = cursor
        self._timer: Periodic | None = None
        self._text = ""
        self.cursor_visible = True
        self.toggles = 0

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.running

    def start(self, text: str) -> None:
        self._text = text
        self._timer = Periodic(self._rate)
        self.cursor_visible = True
        self._toggle()

    def tick(self, dt: float) -> int:
        """Advance by ``dt``. Returns the number of toggles performed."""
        if not self.running:
            return 0
        assert self._timer is not None
        fired = self._timer.advance(dt)
        for _ in range(fired):
            self._toggle()
        return fired

    def cancel(self) -> bool:
        if self._timer is None:
            return False
        cancelled = self._timer.cancel()
        self._timer = None
        return cancelled

    def _toggle(self) -> None:
        self.cursor_visible = not self.cursor_visible
        self.toggles += 1
        shown = self._text + self._cursor if self.cursor_visible else self._text
        self._display.set_text(self._target, shown)
