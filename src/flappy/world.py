"""
world.py: The explicit game world record and its three-state machine.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .data_models import GameState, Hud, Updatable
from .ground import GroundStrip
from .obstacle_field import ObstacleField
from .physics_core import Flyer
from .score import ScoreTracker


@dataclass
class GameWorld:
    """
    Everything a tick reads or writes. Passed by reference to every update
    and to the render pass; there is no module-level game state.
    """
    hud: Hud = field(default_factory=Hud)
    flyer: Flyer = field(default_factory=Flyer)
    ground: GroundStrip = field(default_factory=GroundStrip)
    obstacles: ObstacleField = field(default_factory=ObstacleField)
    score: Optional[ScoreTracker] = None
    state: GameState = GameState.READY
    frames: int = 0

    def __post_init__(self):
        if self.score is None:
            self.score = ScoreTracker(self.hud)

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> "GameWorld":
        return cls(obstacles=ObstacleField(rng=random.Random(seed)))

    def updatables(self) -> Tuple[Updatable, ...]:
        # Order matters: a ground hit turns the state to OVER before the rest run.
        return (self.flyer, self.ground, self.obstacles)

    def step(self):
        """Advances the simulation by one logical frame."""
        playing = self.state is GameState.PLAYING
        for part in self.updatables():
            if part.update(self):
                self.game_over()
        # The spawn cadence counts PLAYING ticks only.
        if playing:
            self.frames += 1

    # -------- Transitions --------

    def activate(self):
        """The single gameplay input: start the run, or flap during it."""
        if self.state is GameState.READY:
            self.state = GameState.PLAYING
            self.hud.hide_ready()
            self.flyer.flap()
        elif self.state is GameState.PLAYING:
            self.flyer.flap()

    def game_over(self):
        if self.state is not GameState.PLAYING:
            return
        self.state = GameState.OVER
        self.hud.show_game_over(self.score.value)

    def restart(self):
        if self.state is not GameState.OVER:
            return
        self.flyer.reset()
        self.obstacles.reset()
        self.score.reset()
        self.frames = 0
        self.state = GameState.READY
        self.hud.show_ready()
