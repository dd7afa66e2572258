"""
obstacle_field.py: The authoritative obstacle simulation (spawn, scroll, collide, score).
"""

import math
import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    SCREEN_WIDTH, OBSTACLE_WIDTH, OBSTACLE_HEIGHT, OBSTACLE_SPEED,
    OBSTACLE_SPAWN_INTERVAL, OBSTACLE_BASE_OFFSET
)
from .data_models import GameState, Obstacle


@dataclass
class ObstacleField:
    """
    Owns the obstacle sequence. Obstacles spawn at the right edge and all move
    at the same speed, so spawn order is also ascending x order.
    """
    obstacles: List[Obstacle] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)

    def _spawn_obstacle(self):
        """Appends a new pair off the right edge with a banded random offset."""
        y = OBSTACLE_BASE_OFFSET * (self.rng.random() + 1)
        self.obstacles.append(Obstacle(x=float(SCREEN_WIDTH), y=y))

    def collides(self, flyer, obstacle: Obstacle) -> bool:
        if not (flyer.x + flyer.radius > obstacle.x
                and flyer.x - flyer.radius < obstacle.right):
            return False
        return (flyer.y - flyer.radius < obstacle.top_edge
                or flyer.y + flyer.radius > obstacle.bottom_edge)

    def update(self, world) -> bool:
        """
        Spawn, advance, collide and remove for one tick.
        Returns True if the flyer hit any obstacle.
        """
        if world.state is not GameState.PLAYING:
            return False

        if world.frames % OBSTACLE_SPAWN_INTERVAL == 0:
            self._spawn_obstacle()

        hit = False
        for obstacle in self.obstacles:
            obstacle.x -= OBSTACLE_SPEED
            if self.collides(world.flyer, obstacle):
                hit = True

        # Off-screen pairs are always at the front; drain all of them.
        while self.obstacles and self.obstacles[0].right <= 0:
            self.obstacles.pop(0)
            world.score.increment()

        return hit

    def reset(self):
        self.obstacles = []

    def draw(self, canvas, sprites):
        image = sprites["obstacle"]
        for obstacle in self.obstacles:
            # Top barrier: the same sprite turned 180 degrees about its centre
            canvas.save()
            canvas.translate(obstacle.x + OBSTACLE_WIDTH / 2,
                             obstacle.y + OBSTACLE_HEIGHT / 2)
            canvas.rotate(math.pi)
            canvas.draw_image(image, -OBSTACLE_WIDTH / 2, -OBSTACLE_HEIGHT / 2,
                              OBSTACLE_WIDTH, OBSTACLE_HEIGHT)
            canvas.restore()

            canvas.draw_image(image, obstacle.x, obstacle.bottom_edge,
                              OBSTACLE_WIDTH, OBSTACLE_HEIGHT)
