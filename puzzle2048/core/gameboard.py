"""
Row compression, tile spawning and end-of-game detection for the 2048 puzzle.

Boards hold tile ranks: 0 is an empty cell and a rank ``r > 0`` is displayed as ``2**r``.
"""

import logging

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, ndarray, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from puzzle2048.core.tile import Tile

# ##>: Spawned tiles are rank 1 (value 2) or rank 2 (value 4) with equal probability.
TILE_SPAWN_PROBS: dict[int, float] = {1: 0.5, 2: 0.5}

# ##>: Pre-computed ranks and probabilities for fast sampling.
_TILE_RANKS = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator used when the caller does not supply one.
_GENERATOR = default_rng(PCG64DXSM())

_logger = logging.getLogger(__name__)


def is_compressible(row: ndarray) -> bool:
    """
    Check if a row still holds a slide or a merge toward index 0.

    Parameters
    ----------
    row : ndarray
        A 1D array of ranks.

    Returns
    -------
    bool
        True if some non-empty cell has an empty or equal-ranked neighbour on its left.
    """
    previous, current = row[:-1], row[1:]
    return bool(np_any((current != 0) & ((previous == 0) | (previous == current))))


def compress_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Slide and merge a row toward index 0 until it is stable.

    Parameters
    ----------
    row : ndarray
        A 1D array of ranks. It is not modified.

    Returns
    -------
    score : int
        Sum of the values of the tiles created by merges.
    compressed_row : ndarray
        The stable row.

    Notes
    -----
    - One sweep walks columns ``1..n-1``: a tile slides into an empty left neighbour, or merges into an
      equal left neighbour, which gains one rank.
    - Sweeps repeat while the row is compressible, so merges cascade: ``[1, 1, 1, 1]`` becomes
      ``[3, 0, 0, 0]`` for a score of ``4 + 4 + 8``.
    """
    line = row.copy()
    score = 0

    while is_compressible(line):
        for i in range(1, len(line)):
            if line[i - 1] == 0:
                line[i - 1], line[i] = line[i], 0
            elif line[i - 1] == line[i]:
                line[i - 1] += 1
                line[i] = 0
                score += 2 ** int(line[i - 1])

    return score, line


def slide_and_merge(board: ndarray) -> tuple[int, ndarray, bool]:
    """
    Compress every row of the board toward column 0.

    Parameters
    ----------
    board : ndarray
        The game board of ranks, already in canonical orientation.

    Returns
    -------
    score : int
        Total score obtained from all merges.
    updated_board : ndarray
        The board after compression.
    shifted : bool
        True if at least one row changed.
    """
    result = zeros_like(board)
    score = 0
    shifted = False

    for i, row in enumerate(board):
        if is_compressible(row):
            shifted = True
            score_row, result[i] = compress_row(row)
            score += score_row
        else:
            result[i] = row

    return score, result, shifted


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """Coordinates ``(x, y)`` of every empty cell, row by row."""
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def spawn_tile(board: ndarray, generator: Generator | None = None) -> Tile | None:
    """
    Place a rank 1 or rank 2 tile on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board of ranks. **Modified in-place.**
    generator : Generator, optional
        Random generator. The module-level generator is used when omitted.

    Returns
    -------
    Tile or None
        The spawned tile, or None when the board has no empty cell.

    Notes
    -----
    The cell is drawn uniformly from the empty cells, so an occupied cell is never chosen and a full
    board is reported instead of retried.
    """
    rng = generator if generator is not None else _GENERATOR

    cells = empty_cells(board)
    if not cells:
        _logger.warning('Board is full, no tile spawned.')
        return None

    x, y = cells[int(rng.integers(len(cells)))]
    rank = int(rng.choice(_TILE_RANKS, p=_TILE_PROBS))
    board[x, y] = rank
    return Tile(rank=rank, x=x, y=y)


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The game board of ranks.

    Returns
    -------
    bool
        True when every cell is occupied and no two adjacent cells share a rank.
    """
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )
