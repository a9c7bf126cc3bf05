"""
Immutable containers describing a game in progress.
"""

from enum import Enum
from typing import NamedTuple

from numpy import count_nonzero, ndarray

from puzzle2048.core.gameboard import is_done
from puzzle2048.core.tile import Tile, tiles


class Mode(str, Enum):
    """
    Play mode.

    NORMAL: the player picks a direction, the engine moves then spawns a tile.
    REVERSE_AUTO_PLAY: the player places a tile, the engine picks a random direction.
    """

    NORMAL = 'normal'
    REVERSE_AUTO_PLAY = 'reverse'


class ElapsedTime(NamedTuple):
    """Time spent on the current game, as hours, minutes and seconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def tick(self) -> 'ElapsedTime':
        """Advance by one second, carrying into minutes then hours."""
        hours, minutes, seconds = self.hours, self.minutes, self.seconds + 1
        if seconds >= 60:
            seconds = 0
            minutes += 1
        if minutes >= 60:
            minutes = 0
            hours += 1
        return ElapsedTime(hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f'{self.hours}:{self.minutes:02d}:{self.seconds:02d}'


class GameState(NamedTuple):
    """
    Immutable game state container.

    Attributes
    ----------
    board : ndarray
        The 4x4 board of ranks, dtype int64. Never mutated once the state is built.
    score : int
        Sum of the values of every tile created by a merge.
    move_count : int
        Number of moves that changed the board.
    elapsed : ElapsedTime
        Time spent on this game.
    mode : Mode
        Current play mode.
    """

    board: ndarray
    score: int = 0
    move_count: int = 0
    elapsed: ElapsedTime = ElapsedTime()
    mode: Mode = Mode.NORMAL

    @property
    def tiles(self) -> list[Tile]:
        """All 16 cells as tiles, row by row."""
        return tiles(self.board)

    @property
    def occupied(self) -> int:
        return int(count_nonzero(self.board))

    @property
    def is_finished(self) -> bool:
        """True when the board is full and no move can change it."""
        return is_done(self.board)
