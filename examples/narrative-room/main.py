"""Narrative Room - interactive scene scripting demo.

Exercises cue-panels, cue-typewriter, cue-hover, cue-schedule, and cue-signal.

Controls:
  Space   Transition to the next panel (ignored while one is running)
  E       Reveal the canvas and start the slideshow (once)
  A       Toggle timed auto-advance of panels
  Click   Bring the keepsake closer / click elsewhere to put it back
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from game.input import PygameInput
from game.scene import VIEWER, Scene
from ui.constants import FPS, SCREEN_H, SCREEN_W, STATUS_H, TPS
from ui.render import cube_rect, draw_scene


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Narrative Room - cue demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    caption_font = pygame.font.SysFont("serif", 20)

    scene: Scene | None = None

    def hit_test(target, pos: tuple[int, int]) -> bool:
        if scene is None or not scene.stage.has(target):
            return False
        return cube_rect(scene.stage, target, VIEWER.position[2]).collidepoint(pos)

    ui_rect = pygame.Rect(0, SCREEN_H - STATUS_H, SCREEN_W, STATUS_H)
    controls = PygameInput(hit_test, ui_rect)
    scene = Scene(controls)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_a:
                scene.toggle_auto_advance()
            else:
                controls.handle(event)

        # --- Tick ---
        while accumulator >= tick_interval:
            scene.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        draw_scene(screen, scene, font, caption_font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
