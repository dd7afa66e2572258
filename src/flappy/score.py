"""
score.py: Obstacle clearance counter, republished to the score display.
"""

from .data_models import Hud


class ScoreTracker:
    """Only the obstacle field's removal path calls increment()."""

    def __init__(self, hud: Hud):
        self._value = 0
        self.hud = hud

    @property
    def value(self) -> int:
        return self._value

    def increment(self):
        self._value += 1
        self.hud.show_score(self._value)

    def reset(self):
        self._value = 0
        self.hud.show_score(self._value)
