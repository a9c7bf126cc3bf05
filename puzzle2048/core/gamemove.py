"""
Move engine for the 2048 puzzle: directions, the canonical move, and legal-move detection.
"""

import logging
from enum import IntEnum
from typing import NamedTuple

from numpy import ndarray
from numpy.random import Generator

from puzzle2048.core.gameboard import _GENERATOR, slide_and_merge, spawn_tile
from puzzle2048.core.geometry import Transform, apply_transforms, mirror_vertical, transpose_diagonal, undo_transforms
from puzzle2048.core.tile import Tile

_logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Direction of a move. ``UP`` is the canonical one: rows slide toward column 0."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


# ##: All Actions.
ACTIONS = {direction.name.lower(): direction for direction in Direction}

# ##>: Transforms bringing each direction to the canonical orientation.
TRANSFORMS: dict[Direction, tuple[Transform, ...]] = {
    Direction.UP: (),
    Direction.DOWN: (mirror_vertical,),
    Direction.LEFT: (transpose_diagonal,),
    Direction.RIGHT: (transpose_diagonal, mirror_vertical),
}


class MoveOutcome(NamedTuple):
    """
    Result of one move.

    Attributes
    ----------
    board : ndarray
        Board after the move (and the spawn, if any).
    score : int
        Score gained from merges during the move.
    shifted : bool
        Whether the move changed the board.
    spawned : Tile or None
        Tile spawned after the move, None when nothing was spawned.
    """

    board: ndarray
    score: int
    shifted: bool
    spawned: Tile | None = None


def latent_state(board: ndarray, direction: int) -> tuple[ndarray, int, bool]:
    """
    Apply a direction without spawning a new tile.

    Parameters
    ----------
    board : ndarray
        The current board of ranks. It is not modified.
    direction : int
        The direction to apply (0: up, 1: down, 2: left, 3: right).

    Returns
    -------
    new_board : ndarray
        The board after the move.
    score : int
        Score gained from merges.
    shifted : bool
        Whether any tile moved or merged.

    Raises
    ------
    ValueError
        If ``direction`` is not a valid direction.
    """
    transforms = TRANSFORMS[Direction(direction)]
    canonical = apply_transforms(board, transforms)
    score, updated, shifted = slide_and_merge(canonical)
    if not shifted:
        return board.copy(), 0, False
    return undo_transforms(updated, transforms), score, True


def next_state(board: ndarray, direction: int, generator: Generator | None = None) -> MoveOutcome:
    """
    Apply a direction and spawn a tile if the board changed.

    Parameters
    ----------
    board : ndarray
        The current board of ranks. It is not modified.
    direction : int
        The direction to apply (0: up, 1: down, 2: left, 3: right).
    generator : Generator, optional
        Random generator used by the spawn.

    Returns
    -------
    MoveOutcome
        The new board, the score gained, whether it shifted and the spawned tile.

    Notes
    -----
    A move that changes nothing returns an identical board, a score of 0 and no spawn.
    """
    direction = Direction(direction)
    new_board, score, shifted = latent_state(board, direction)
    spawned = spawn_tile(new_board, generator=generator) if shifted else None
    _logger.debug('Move %s: shifted=%s, score=%d', direction.name, shifted, score)
    return MoveOutcome(board=new_board, score=score, shifted=shifted, spawned=spawned)


def legal_actions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current board of ranks.

    Returns
    -------
    list[Direction]
        Directions whose canonical pass finds at least one compressible row.
    """
    return [direction for direction in Direction if latent_state(board, direction)[2]]


def illegal_actions(board: ndarray) -> list[Direction]:
    """Determine the directions that would leave the board unchanged."""
    legal = legal_actions(board)
    return [direction for direction in Direction if direction not in legal]


def auto_move(board: ndarray, generator: Generator | None = None) -> tuple[MoveOutcome, Direction | None]:
    """
    Move in a random direction, retrying other directions while the move changes nothing.

    Parameters
    ----------
    board : ndarray
        The current board of ranks. It is not modified.
    generator : Generator, optional
        Random generator used to order the directions.

    Returns
    -------
    outcome : MoveOutcome
        Outcome of the first direction that shifted the board. No tile is spawned.
    direction : Direction or None
        The direction played, None when no direction changes the board.
    """
    rng = generator if generator is not None else _GENERATOR

    # ##: Each direction is tried at most once.
    for action in rng.permutation(len(Direction)):
        direction = Direction(int(action))
        new_board, score, shifted = latent_state(board, direction)
        if shifted:
            _logger.debug('Auto move %s: score=%d', direction.name, score)
            return MoveOutcome(board=new_board, score=score, shifted=True), direction

    _logger.debug('Auto move found no direction that changes the board.')
    return MoveOutcome(board=board.copy(), score=0, shifted=False), None
