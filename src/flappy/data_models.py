"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .constants import OBSTACLE_GAP, OBSTACLE_HEIGHT, OBSTACLE_WIDTH


class GameState(Enum):
    READY = 0
    PLAYING = 1
    OVER = 2


@dataclass
class Obstacle:
    """A top/bottom barrier pair sharing one x and one vertical offset."""
    x: float
    y: float

    @property
    def top_edge(self) -> float:
        """Bottom edge of the top barrier."""
        return self.y + OBSTACLE_HEIGHT

    @property
    def bottom_edge(self) -> float:
        """Top edge of the bottom barrier."""
        return self.top_edge + OBSTACLE_GAP

    @property
    def right(self) -> float:
        return self.x + OBSTACLE_WIDTH


@dataclass
class Hud:
    """
    Score display and overlay visibility sinks.
    The core writes into it; the render pass reads it back as UI chrome.
    """
    score: int = 0
    final_score: int = 0
    ready_visible: bool = True
    game_over_visible: bool = False

    def show_score(self, value: int):
        self.score = value

    def show_game_over(self, final_score: int):
        self.final_score = final_score
        self.game_over_visible = True

    def show_ready(self):
        self.game_over_visible = False
        self.ready_visible = True

    def hide_ready(self):
        self.ready_visible = False


class Updatable(Protocol):
    def update(self, world) -> bool:
        """Advance one tick. Returns True when a collision was detected."""


class Drawable(Protocol):
    def draw(self, canvas, sprites) -> None:
        ...
