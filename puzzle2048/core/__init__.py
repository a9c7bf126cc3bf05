# -*- coding: utf-8 -*-
"""
Board-transformation engine of the 2048 puzzle.

It includes the board geometry used to reduce every direction to one canonical pass, the row
compression with cascading merges, tile spawning, and the move engine built on top of them.
"""

from .gameboard import TILE_SPAWN_PROBS, compress_row, empty_cells, is_compressible, is_done, slide_and_merge, spawn_tile
from .gamemove import ACTIONS, Direction, MoveOutcome, auto_move, illegal_actions, latent_state, legal_actions, next_state
from .geometry import BOARD_SIZE, check_cell, max_rank, mirror_vertical, new_board, transpose_diagonal
from .tile import Tile, tile_at, tiles

__all__ = [
    "ACTIONS",
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveOutcome",
    "Tile",
    "auto_move",
    "check_cell",
    "compress_row",
    "empty_cells",
    "illegal_actions",
    "is_compressible",
    "is_done",
    "latent_state",
    "legal_actions",
    "max_rank",
    "mirror_vertical",
    "new_board",
    "next_state",
    "slide_and_merge",
    "spawn_tile",
    "tile_at",
    "tiles",
    "transpose_diagonal",
]
