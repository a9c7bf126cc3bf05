# -*- coding: utf-8 -*-
"""
Sliding-tile merging puzzle in the style of 2048.

The engine works on a 4x4 board of tile ranks: a rank ``r > 0`` is a tile of value ``2**r`` and 0 is
an empty cell.
"""

from .core import Direction, MoveOutcome, Tile
from .envs import (
    ElapsedTime,
    Game,
    GameState,
    Mode,
    advance_one_second,
    apply_direction,
    new_game,
    restart,
    switch_mode,
    upgrade,
)
from .errors import CellOutOfRangeError, GameError, ModeError, OccupiedCellError

__version__ = "1.0.0"

__all__ = [
    "CellOutOfRangeError",
    "Direction",
    "ElapsedTime",
    "Game",
    "GameError",
    "GameState",
    "Mode",
    "ModeError",
    "MoveOutcome",
    "OccupiedCellError",
    "Tile",
    "advance_one_second",
    "apply_direction",
    "new_game",
    "restart",
    "switch_mode",
    "upgrade",
]
