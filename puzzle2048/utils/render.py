"""
Plain-text rendering of a board of ranks.
"""

from numpy import ndarray

from puzzle2048.core.tile import tile_at

# ##>: Width of one cell, enough for a five-digit tile value.
CELL_WIDTH = 6


def render_board(board: ndarray, cell_width: int = CELL_WIDTH) -> str:
    """
    Render the board as a grid of tile values.

    Parameters
    ----------
    board : ndarray
        Board of ranks.
    cell_width : int, optional
        Number of characters reserved for each cell.

    Returns
    -------
    str
        One text line per screen row, empty cells shown as ``.``.

    Notes
    -----
    Cell ``(x, y)`` is drawn on screen column ``x`` and screen row ``y``, so that ``UP``, which slides
    every row toward column 0, moves the tiles toward the top of the grid.
    """
    size_x, size_y = board.shape
    lines = []
    for y in range(size_y):
        labels = [tile_at(board, x, y).label or '.' for x in range(size_x)]
        lines.append(''.join(label.rjust(cell_width) for label in labels))
    return '\n'.join(lines)
