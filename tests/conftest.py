import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.data_models import GameState
from flappy.obstacle_field import ObstacleField
from flappy.world import GameWorld


class FixedRandom:
    """Stands in for random.Random with a constant draw."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value


class RecordingCanvas:
    """Records draw calls instead of painting pixels."""

    width = 320
    height = 480

    def __init__(self):
        self.calls = []
        self.depth = 0

    def save(self):
        self.depth += 1
        self.calls.append(("save",))

    def restore(self):
        self.depth -= 1
        self.calls.append(("restore",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def rotate(self, radians):
        self.calls.append(("rotate", radians))

    def fill_rect(self, color, x, y, w, h):
        self.calls.append(("fill_rect", color, x, y, w, h))

    def draw_image(self, image, x, y, w, h):
        self.calls.append(("draw_image", image, x, y, w, h))

    def draw_text(self, font, text, color, center, shadow=None):
        self.calls.append(("draw_text", text))

    def images(self):
        return [call[1] for call in self.calls if call[0] == "draw_image"]


@pytest.fixture
def world():
    """A READY world whose obstacles spawn at offset -225 (gap 175..275)."""
    return GameWorld(obstacles=ObstacleField(rng=FixedRandom(0.5)))


@pytest.fixture
def playing_world(world):
    world.state = GameState.PLAYING
    world.hud.hide_ready()
    return world


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def sprites():
    # Plain string handles: the core never inspects them.
    return {"flyer": "flyer", "background": "background",
            "ground": "ground", "obstacle": "obstacle"}
