"""Exceptions raised by the game when a caller breaks an operation's precondition."""


class GameError(Exception):
    """Base class for every game precondition failure."""


class CellOutOfRangeError(GameError, IndexError):
    """Cell coordinates fall outside the board."""


class OccupiedCellError(GameError, ValueError):
    """An upgrade targeted a cell that already holds a tile."""


class ModeError(GameError, RuntimeError):
    """The operation is not available in the current game mode."""
