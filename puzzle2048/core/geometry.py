"""
Board geometry for the 2048 puzzle.

The move engine only knows how to slide rows toward column 0. The two involutions defined here map
every other direction onto that canonical orientation and back again.
"""

from typing import Callable

from numpy import int64, ndarray, zeros

from puzzle2048.errors import CellOutOfRangeError

# ##>: Width and height of the square board.
BOARD_SIZE = 4


def new_board(size: int = BOARD_SIZE) -> ndarray:
    """Create an empty board of ranks."""
    return zeros((size, size), dtype=int64)


def mirror_vertical(board: ndarray) -> ndarray:
    """
    Reverse the column order within every row (``y' = size - 1 - y``).

    Parameters
    ----------
    board : ndarray
        Board of ranks.

    Returns
    -------
    ndarray
        A new, contiguous board. Applying the function twice restores the input.
    """
    return board[:, ::-1].copy()


def transpose_diagonal(board: ndarray) -> ndarray:
    """
    Reflect the board across its main diagonal (``board[x][y] <-> board[y][x]``).

    Parameters
    ----------
    board : ndarray
        Board of ranks.

    Returns
    -------
    ndarray
        A new, contiguous board. Applying the function twice restores the input.
    """
    return board.T.copy()


Transform = Callable[[ndarray], ndarray]


def apply_transforms(board: ndarray, transforms: tuple[Transform, ...]) -> ndarray:
    """Apply a sequence of transforms in order."""
    result = board.copy()
    for transform in transforms:
        result = transform(result)
    return result


def undo_transforms(board: ndarray, transforms: tuple[Transform, ...]) -> ndarray:
    """
    Undo a sequence of transforms.

    Every transform here is its own inverse, so undoing means applying the same sequence reversed.
    """
    return apply_transforms(board, tuple(reversed(transforms)))


def check_cell(x: int, y: int, size: int = BOARD_SIZE) -> None:
    """
    Make sure ``(x, y)`` addresses a cell of the board.

    Raises
    ------
    CellOutOfRangeError
        If either coordinate is outside ``0..size - 1``.
    """
    if not (0 <= x < size and 0 <= y < size):
        raise CellOutOfRangeError(f'Cell ({x}, {y}) is outside the {size}x{size} board.')


def max_rank(board: ndarray) -> int:
    """Highest rank on the board, 0 for an empty board."""
    return int(board.max())
