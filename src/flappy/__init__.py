"""
flappy: A single-screen arcade game built around a fixed-timestep simulation core.
"""

from .data_models import GameState, Obstacle, Hud
from .world import GameWorld

__all__ = ["GameState", "Obstacle", "Hud", "GameWorld"]
