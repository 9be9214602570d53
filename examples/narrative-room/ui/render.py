"""Drawing of the stage: panels, overlay, canvas, lamp, caption and keepsake."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    BG_COLOR,
    CANVAS_BORDER,
    CANVAS_RECT,
    CUBE_COLOR,
    CUBE_HOVER,
    CUBE_SIZE,
    FOCAL,
    HORIZON_Y,
    LAMP_COLOR,
    LAMP_POS,
    OVERLAY_COLOR,
    PANEL_COLORS,
    PANEL_RECT,
    SCREEN_H,
    SCREEN_W,
    SLIDE_COLORS,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TEXT_POS,
)

from game.scene import CUBE, VIEWER

if TYPE_CHECKING:
    from cue import Stage, Vec3
    from game.scene import Scene


def project(position: Vec3, viewer_z: float) -> tuple[int, int, float]:
    """Perspective-project a world point. Returns screen x, y and pixels per unit."""
    x, y, z = position
    depth = max(z - viewer_z, 0.1)
    ppu = FOCAL / depth
    return int(SCREEN_W / 2 + x * ppu), int(HORIZON_Y - y * ppu), ppu


def cube_rect(stage: Stage, target, viewer_z: float) -> pygame.Rect:
    node = stage.node(target)
    sx, sy, ppu = project(node.position, viewer_z)
    w = CUBE_SIZE * node.scale[0] * ppu
    h = CUBE_SIZE * node.scale[1] * ppu
    return pygame.Rect(int(sx - w / 2), int(sy - h / 2), int(w), int(h))


def _blend(color: tuple[int, int, int], alpha: float) -> tuple[int, int, int]:
    a = max(0.0, min(1.0, alpha))
    return tuple(int(b + (c - b) * a) for c, b in zip(color, BG_COLOR))


def draw_panels(surface: pygame.Surface, scene: Scene, font: pygame.font.Font) -> None:
    stage = scene.stage
    for target in scene.panels.panels:
        if not stage.has(target) or not stage.node(target).active:
            continue
        alpha = scene.panels.gate(target).opacity
        pygame.draw.rect(surface, _blend(PANEL_COLORS[target], alpha), PANEL_RECT)
        label = font.render(target.replace("panel_", "").upper(), True, _blend(TEXT_COLOR, alpha))
        surface.blit(label, (PANEL_RECT[0] + 12, PANEL_RECT[1] + 10))

    if stage.has("static") and stage.node("static").active:
        overlay = pygame.Surface(PANEL_RECT[2:])
        overlay.fill(OVERLAY_COLOR)
        overlay.set_alpha(int(255 * stage.node("static").opacity))
        surface.blit(overlay, PANEL_RECT[:2])


def draw_canvas(surface: pygame.Surface, stage: Stage) -> None:
    pygame.draw.rect(surface, CANVAS_BORDER, CANVAS_RECT, 1)
    if stage.has("lamp") and stage.node("lamp").active:
        pygame.draw.circle(surface, LAMP_COLOR, LAMP_POS, 10)
    if not (stage.has("canvas") and stage.node("canvas").active):
        return
    if stage.has("canvas_image"):
        node = stage.node("canvas_image")
        if node.image is not None:
            inner = pygame.Rect(CANVAS_RECT).inflate(-16, -16)
            pygame.draw.rect(surface, _blend(SLIDE_COLORS[node.image], node.opacity), inner)


def draw_caption(surface: pygame.Surface, stage: Stage, font: pygame.font.Font) -> None:
    if stage.has("caption"):
        surface.blit(font.render(stage.node("caption").text, True, TEXT_COLOR), TEXT_POS)


def draw_keepsake(surface: pygame.Surface, scene: Scene) -> None:
    rect = cube_rect(scene.stage, CUBE, VIEWER.position[2])
    hovered = scene.hover.scale != scene.hover.original_scale
    pygame.draw.rect(surface, CUBE_HOVER if hovered else CUBE_COLOR, rect)


def draw_status_bar(surface: pygame.Surface, scene: Scene, font: pygame.font.Font) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    auto = "on" if scene.auto_advance else "off"
    text = (
        f"Space: next panel  E: reveal  A: auto ({auto})  Click: inspect  Esc: quit"
        f"   | {scene.panels.state.value}  transitions={scene.transitions}"
        f"  slides={scene.slides}  last={scene.last_signal}"
    )
    surface.blit(font.render(text, True, TEXT_DIM), (10, y + 10))


def draw_scene(
    surface: pygame.Surface,
    scene: Scene,
    font: pygame.font.Font,
    caption_font: pygame.font.Font,
) -> None:
    surface.fill(BG_COLOR)
    draw_panels(surface, scene, font)
    draw_canvas(surface, scene.stage)
    draw_caption(surface, scene.stage, caption_font)
    draw_keepsake(surface, scene)
    draw_status_bar(surface, scene, font)
