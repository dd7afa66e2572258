"""
render.py: The per-frame render pass. Reads the world, never mutates it.
"""

from typing import Dict, Optional

import pygame

from .constants import (
    SKY_COLOR, TEXT_COLOR, SHADOW_COLOR, PANEL_COLOR, BUTTON_COLOR, RESTART_BUTTON
)
from .data_models import Drawable, GameState


class HudFonts:
    """Fonts for the overlay chrome."""

    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.large = pygame.font.Font(None, 48)
        self.medium = pygame.font.Font(None, 32)
        self.small = pygame.font.Font(None, 24)


def draw_scene(world, canvas, sprites: Dict[str, pygame.Surface]):
    """Background, obstacles, ground, flyer. Same order in every state."""
    canvas.fill_rect(SKY_COLOR, 0, 0, canvas.width, canvas.height)
    canvas.draw_image(sprites["background"], 0, 0, canvas.width, canvas.height)

    layers: tuple[Drawable, ...] = (world.obstacles, world.ground, world.flyer)
    for layer in layers:
        layer.draw(canvas, sprites)


def draw_hud(world, canvas, fonts: HudFonts):
    hud = world.hud
    mid_x = canvas.width / 2

    if world.state is GameState.PLAYING:
        canvas.draw_text(fonts.large, str(hud.score), TEXT_COLOR, (mid_x, 50),
                         shadow=SHADOW_COLOR)

    if hud.ready_visible:
        canvas.draw_text(fonts.large, "Get Ready", TEXT_COLOR, (mid_x, 120),
                         shadow=SHADOW_COLOR)
        canvas.draw_text(fonts.small, "Space / Up / Click to flap", TEXT_COLOR,
                         (mid_x, 240), shadow=SHADOW_COLOR)

    if hud.game_over_visible:
        canvas.draw_text(fonts.large, "Game Over", TEXT_COLOR, (mid_x, 150),
                         shadow=SHADOW_COLOR)
        canvas.fill_rect(PANEL_COLOR, mid_x - 80, 190, 160, 70)
        canvas.draw_text(fonts.small, "Score", SHADOW_COLOR, (mid_x, 208))
        canvas.draw_text(fonts.medium, str(hud.final_score), SHADOW_COLOR, (mid_x, 238))

        bx, by, bw, bh = RESTART_BUTTON
        canvas.fill_rect(BUTTON_COLOR, bx, by, bw, bh)
        canvas.draw_text(fonts.small, "Restart", TEXT_COLOR, (bx + bw / 2, by + bh / 2))


def render_frame(world, canvas, sprites: Dict[str, pygame.Surface],
                 fonts: Optional[HudFonts] = None):
    draw_scene(world, canvas, sprites)
    if fonts is not None:
        draw_hud(world, canvas, fonts)
