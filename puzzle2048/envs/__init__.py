# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the game state containers, the functional game operations, and the `Game`
class that wraps them into a single stateful object.
"""

from .game import Game, advance_one_second, apply_direction, new_game, restart, switch_mode, upgrade
from .state import ElapsedTime, GameState, Mode

__all__ = [
    "ElapsedTime",
    "Game",
    "GameState",
    "Mode",
    "advance_one_second",
    "apply_direction",
    "new_game",
    "restart",
    "switch_mode",
    "upgrade",
]
