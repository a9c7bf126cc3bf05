"""
A single board cell viewed as a tile.

Tiles are built from the board on demand: the coordinates come from the array indices, so a tile's
position can never drift away from where it actually sits on the board.
"""

from typing import NamedTuple

from numpy import ndarray


class Tile(NamedTuple):
    """
    Immutable view of one cell.

    Attributes
    ----------
    rank : int
        Exponent of the tile value, 0 for an empty cell.
    x : int
        Row index of the cell.
    y : int
        Column index of the cell.
    """

    rank: int
    x: int
    y: int

    @property
    def is_empty(self) -> bool:
        return self.rank == 0

    @property
    def value(self) -> int:
        """Displayed value of the tile, ``2**rank``, or 0 when the cell is empty."""
        return 0 if self.rank == 0 else 2**self.rank

    @property
    def label(self) -> str:
        return '' if self.rank == 0 else str(self.value)


def tiles(board: ndarray) -> list[Tile]:
    """
    List every cell of the board as a tile, row by row.

    Parameters
    ----------
    board : ndarray
        Board of ranks.

    Returns
    -------
    list[Tile]
        One tile per cell, ordered by ``(x, y)``.
    """
    return [Tile(rank=int(board[x, y]), x=x, y=y) for x in range(board.shape[0]) for y in range(board.shape[1])]


def tile_at(board: ndarray, x: int, y: int) -> Tile:
    """Return the tile at ``(x, y)``."""
    return Tile(rank=int(board[x, y]), x=x, y=y)
