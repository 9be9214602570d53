"""Pygame event adapter implementing the engine's InputSource protocol."""
from __future__ import annotations

from typing import Callable

import pygame

from cue import PointerState, Target

HitTest = Callable[[Target, tuple[int, int]], bool]


class PygameInput:
    """Collects one frame of pygame events for the tick systems to poll.

    Presses are latched until the next tick reads them, so a frame that runs
    no tick (or several) neither drops nor repeats a press.
    """

    def __init__(self, hit_test: HitTest, ui_rect: pygame.Rect) -> None:
        self._hit_test = hit_test
        self._ui_rect = ui_rect
        self._trigger = False
        self._reveal = False
        self._press_pos: tuple[int, int] | None = None
        self._mouse_pos = (0, 0)
        self._hovering: dict[Target, bool] = {}

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self._trigger = True
            elif event.key == pygame.K_e:
                self._reveal = True
        elif event.type == pygame.MOUSEMOTION:
            self._mouse_pos = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse_pos = event.pos
            self._press_pos = event.pos

    # --- InputSource ---

    def is_trigger_pressed(self) -> bool:
        pressed, self._trigger = self._trigger, False
        return pressed

    def is_reveal_pressed(self) -> bool:
        pressed, self._reveal = self._reveal, False
        return pressed

    def pointer_state(self, target: Target) -> PointerState:
        over = self._hit_test(target, self._mouse_pos)
        was_over = self._hovering.get(target, False)
        self._hovering[target] = over

        press = self._press_pos
        self._press_pos = None
        clicked = press is not None and self._hit_test(target, press)
        return PointerState(
            entered=over and not was_over,
            exited=was_over and not over,
            clicked=clicked,
            pressed=press is not None,
            over_ui=press is not None and self._ui_rect.collidepoint(press),
        )

    def pointer_for(self, target: Target) -> Callable[[], PointerState]:
        return lambda: self.pointer_state(target)
