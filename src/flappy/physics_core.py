"""
physics_core.py: The flyer's deterministic per-tick kinematics and ground collision.
"""

from dataclasses import dataclass

from .constants import (
    FLYER_X, FLYER_REST_Y, FLYER_WIDTH, FLYER_HEIGHT, FLYER_RADIUS,
    GRAVITY, FLAP_IMPULSE, ROTATION_ASCENT, ROTATION_STEP, ROTATION_MAX,
    GROUND_Y
)
from .data_models import GameState


@dataclass
class Flyer:
    """
    The controlled object. x is fixed; y, velocity and rotation change every tick.
    Rotation is in radians and stays within [ROTATION_ASCENT, ROTATION_MAX].
    """
    x: float = FLYER_X
    y: float = FLYER_REST_Y
    velocity: float = 0.0
    rotation: float = 0.0
    width: int = FLYER_WIDTH
    height: int = FLYER_HEIGHT
    radius: int = FLYER_RADIUS

    def flap(self):
        """Instantaneous upward kick."""
        self.velocity = -FLAP_IMPULSE

    def reset(self):
        self.velocity = 0.0
        self.rotation = 0.0

    def update(self, world) -> bool:
        """
        Advances one tick. Returns True when the flyer reached the ground plane.
        """
        if world.state is GameState.READY:
            self.y = FLYER_REST_Y
            self.rotation = 0.0
            return False

        self.velocity += GRAVITY
        self.y += self.velocity

        # Two-pose pitch: nose up while rising, then tip forward a step per tick
        if self.velocity < FLAP_IMPULSE:
            self.rotation = ROTATION_ASCENT
        else:
            self.rotation = min(self.rotation + ROTATION_STEP, ROTATION_MAX)

        if self.y + self.height / 2 >= GROUND_Y:
            self.y = GROUND_Y - self.height / 2
            return True
        return False

    def draw(self, canvas, sprites):
        canvas.save()
        canvas.translate(self.x, self.y)
        canvas.rotate(self.rotation)
        canvas.draw_image(sprites["flyer"], -self.width / 2, -self.height / 2,
                          self.width, self.height)
        canvas.restore()
