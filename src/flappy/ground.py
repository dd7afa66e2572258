"""
ground.py: The scrolling ground strip. Cosmetic, apart from defining the ground plane.
"""

from dataclasses import dataclass

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT, GROUND_SPEED
from .data_models import GameState


@dataclass
class GroundStrip:
    """
    `scrolled` is the distance travelled, wrapped into [0, wrap_width).
    The strip is drawn at x = -scrolled.
    """
    scrolled: float = 0.0
    viewport_width: int = SCREEN_WIDTH
    height: int = GROUND_HEIGHT

    @property
    def wrap_width(self) -> float:
        return self.viewport_width / 2

    @property
    def x(self) -> float:
        return -self.scrolled

    @property
    def top(self) -> float:
        return SCREEN_HEIGHT - self.height

    def update(self, world) -> bool:
        if world.state is not GameState.PLAYING:
            return False
        if self.wrap_width <= 0:
            self.scrolled = 0.0
            return False
        self.scrolled = (self.scrolled + GROUND_SPEED) % self.wrap_width
        return False

    def draw(self, canvas, sprites):
        image = sprites["ground"]
        # Two tiles for a seamless wrap
        canvas.draw_image(image, self.x, self.top, self.viewport_width, self.height)
        canvas.draw_image(image, self.x + self.viewport_width, self.top,
                          self.viewport_width, self.height)
