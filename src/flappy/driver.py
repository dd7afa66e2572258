"""
driver.py: The fixed-timestep loop. One logical tick and one render per display refresh,
started only once every asset has loaded.
"""

import asyncio
from typing import Callable, Optional

import pygame

from .constants import TICK_RATE


class Driver:
    """
    poll_input runs first in each tick so that input is applied between
    frames; after_step sees the stepped world; render only draws it.
    """

    def __init__(self, world, provider,
                 render: Callable[[object, dict], None],
                 poll_input: Optional[Callable[[object], None]] = None,
                 after_step: Optional[Callable[[object], None]] = None,
                 tick_rate: int = TICK_RATE, clock=None):
        self.world = world
        self.provider = provider
        self.render = render
        self.poll_input = poll_input
        self.after_step = after_step
        self.tick_rate = tick_rate
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.running = False
        self.ticks = 0

    def stop(self):
        self.running = False

    def tick(self):
        if self.poll_input is not None:
            self.poll_input(self.world)
        if not self.running:
            return
        self.world.step()
        if self.after_step is not None:
            self.after_step(self.world)
        self.render(self.world, self.provider.sprites)
        self.ticks += 1

    async def run(self, max_ticks: Optional[int] = None):
        """Awaits the asset barrier, then ticks until stopped."""
        await self.provider.load_all()
        self.running = True
        while self.running:
            if max_ticks is not None and self.ticks >= max_ticks:
                break
            self.tick()
            self.clock.tick(self.tick_rate)
            # Yield to the host between frames
            await asyncio.sleep(0)
        self.running = False
