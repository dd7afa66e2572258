"""
input_router.py: Maps host input events to logical actions and applies them to the world.
"""

from enum import Enum
from typing import Optional, Tuple

import pygame

from .constants import RESTART_BUTTON
from .data_models import GameState

ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP)
RESTART_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_ESCAPE,)


class Action(Enum):
    ACTIVATE = "activate"
    RESTART = "restart"
    QUIT = "quit"


def restart_button_hit(pos: Tuple[int, int]) -> bool:
    return pygame.Rect(RESTART_BUTTON).collidepoint(pos)


def translate_event(event: pygame.event.Event, state: GameState,
                    scale: int = 1) -> Optional[Action]:
    """
    Returns the logical action for an event, or None.
    Pointer positions are in window pixels and are divided by `scale`.
    """
    if event.type == pygame.QUIT:
        return Action.QUIT
    if event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return Action.QUIT
        if event.key in ACTIVATE_KEYS:
            return Action.ACTIVATE
        if event.key in RESTART_KEYS:
            return Action.RESTART
        return None
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        x, y = event.pos
        # While OVER the only live control on the playfield is the restart button
        if state is GameState.OVER:
            if restart_button_hit((x // scale, y // scale)):
                return Action.RESTART
            return None
        return Action.ACTIVATE
    return None


def apply_action(world, action: Action):
    """Out-of-state actions are ignored by the world itself."""
    if action is Action.ACTIVATE:
        world.activate()
    elif action is Action.RESTART:
        world.restart()
