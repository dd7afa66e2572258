#!/usr/bin/env python3
"""
client.py

pygame host: window, upscaling, event pump and the entry point.
Uses the modular core: world, render, input_router, driver, assets.
"""

import argparse
import asyncio
from pathlib import Path
from typing import Optional

import pygame

from .assets import ImageProvider
from .canvas import Canvas
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, DEFAULT_SCALE, TICK_RATE
from .data_models import GameState
from .driver import Driver
from .input_router import Action, apply_action, translate_event
from .render import HudFonts, render_frame
from .world import GameWorld


class FlappyClient:
    def __init__(self, scale: int = DEFAULT_SCALE, asset_dir: Optional[Path] = None,
                 seed: Optional[int] = None):
        pygame.init()
        self.scale = max(1, int(scale))
        self.window = pygame.display.set_mode(
            (SCREEN_WIDTH * self.scale, SCREEN_HEIGHT * self.scale))
        pygame.display.set_caption("Flappy")

        # The game always draws at the logical resolution
        self.frame = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.canvas = Canvas(self.frame)
        self.fonts = HudFonts()

        self.world = GameWorld.seeded(seed)
        self.provider = ImageProvider(asset_dir)
        self.driver = Driver(self.world, self.provider,
                             render=self._draw_game,
                             poll_input=self._handle_events,
                             after_step=self._report_transition,
                             tick_rate=TICK_RATE)
        self._last_state = self.world.state

    def _handle_events(self, world: GameWorld):
        for event in pygame.event.get():
            action = translate_event(event, world.state, self.scale)
            if action is None:
                continue
            if action is Action.QUIT:
                self.driver.stop()
                return
            apply_action(world, action)

    def _report_transition(self, world: GameWorld):
        state = world.state
        if state is not self._last_state and state is GameState.OVER:
            print(f"Game over. Final score: {world.hud.final_score}")
        self._last_state = state

    def _draw_game(self, world: GameWorld, sprites: dict):
        render_frame(world, self.canvas, sprites, self.fonts)
        if self.scale == 1:
            self.window.blit(self.frame, (0, 0))
        else:
            pygame.transform.scale(self.frame, self.window.get_size(), self.window)
        pygame.display.flip()

    def run(self):
        """The main client execution loop."""
        try:
            asyncio.run(self.driver.run())
        except KeyboardInterrupt:
            pass
        finally:
            pygame.quit()
            print("Client stopped.")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy", description="Single-screen flappy arcade game.")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help="integer window upscaling factor")
    parser.add_argument("--assets", type=Path, default=None,
                        help="directory holding the sprite images")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for obstacle placement")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    FlappyClient(scale=args.scale, asset_dir=args.assets, seed=args.seed).run()


if __name__ == "__main__":
    main()
