"""
Game-level operations for the 2048 puzzle.

The functions take a ``GameState`` and return a new one; the input state is never modified. The
``Game`` class wraps them for callers that prefer a single mutable object, such as the console shell.
"""

import logging

from numpy import ndarray
from numpy.random import Generator, default_rng

from puzzle2048.core.gameboard import spawn_tile
from puzzle2048.core.gamemove import ACTIONS, MoveOutcome, auto_move, next_state
from puzzle2048.core.geometry import check_cell, new_board
from puzzle2048.core.tile import Tile
from puzzle2048.envs.state import ElapsedTime, GameState, Mode
from puzzle2048.errors import ModeError, OccupiedCellError
from puzzle2048.utils.render import render_board

_logger = logging.getLogger(__name__)


def new_game(generator: Generator | None = None, mode: Mode = Mode.NORMAL) -> GameState:
    """
    Create a fresh game with a single seeded tile.

    Parameters
    ----------
    generator : Generator, optional
        Random generator used to seed the first tile.
    mode : Mode, optional
        Play mode of the new game (default is ``Mode.NORMAL``).

    Returns
    -------
    GameState
        State with one tile of rank 1 or 2, and zero score, moves and elapsed time.
    """
    board = new_board()
    spawn_tile(board, generator=generator)
    return GameState(board=board, mode=Mode(mode))


def _advance(state: GameState, outcome: MoveOutcome) -> GameState:
    if not outcome.shifted:
        return state
    return state._replace(
        board=outcome.board,
        score=state.score + outcome.score,
        move_count=state.move_count + 1,
    )


def apply_direction(state: GameState, direction: int, generator: Generator | None = None) -> GameState:
    """
    Move every tile in a direction, then spawn a tile if anything moved.

    Parameters
    ----------
    state : GameState
        Current state.
    direction : int
        The direction to apply (0: up, 1: down, 2: left, 3: right).
    generator : Generator, optional
        Random generator used by the spawn.

    Returns
    -------
    GameState
        The updated state, or ``state`` itself when the move changes nothing.
    """
    outcome = next_state(state.board, direction, generator=generator)
    return _advance(state, outcome)


def restart(state: GameState, generator: Generator | None = None) -> GameState:
    """Start over with a fresh normal game, whatever the current state."""
    _logger.info('Restart after %d moves, score %d.', state.move_count, state.score)
    return new_game(generator=generator, mode=Mode.NORMAL)


def switch_mode(state: GameState, generator: Generator | None = None) -> GameState:
    """Start a fresh game in the other play mode."""
    mode = Mode.REVERSE_AUTO_PLAY if state.mode is Mode.NORMAL else Mode.NORMAL
    _logger.info('Switch mode: %s -> %s.', state.mode.value, mode.value)
    return new_game(generator=generator, mode=mode)


def upgrade(state: GameState, x: int, y: int, generator: Generator | None = None, rank: int = 1) -> GameState:
    """
    Place a tile on an empty cell, then let the engine play one random move.

    Parameters
    ----------
    state : GameState
        Current state, in ``Mode.REVERSE_AUTO_PLAY``.
    x : int
        Row index of the target cell.
    y : int
        Column index of the target cell.
    generator : Generator, optional
        Random generator used to pick the direction.
    rank : int, optional
        Rank of the placed tile (default is 1, a tile of value 2).

    Returns
    -------
    GameState
        The updated state. When no direction changes the board after the placement, only the
        placement is applied.

    Raises
    ------
    ModeError
        If the game is not in reverse mode.
    CellOutOfRangeError
        If ``(x, y)`` is outside the board.
    OccupiedCellError
        If the target cell already holds a tile.
    """
    if state.mode is not Mode.REVERSE_AUTO_PLAY:
        raise ModeError('Tiles can only be placed in reverse mode.')
    check_cell(x, y, size=state.board.shape[0])
    if state.board[x, y] != 0:
        _logger.warning('Rejected upgrade on occupied cell (%d, %d).', x, y)
        raise OccupiedCellError(f'Cell ({x}, {y}) is already occupied.')
    if rank < 1:
        raise ValueError(f'rank must be >= 1, got {rank}')

    board = state.board.copy()
    board[x, y] = rank
    placed = state._replace(board=board)

    outcome, _ = auto_move(board, generator=generator)
    return _advance(placed, outcome)


def advance_one_second(state: GameState) -> GameState:
    """Advance the elapsed time of the game by one second."""
    return state._replace(elapsed=state.elapsed.tick())


class Game:
    """
    Stateful 2048 game.

    This class owns one ``GameState`` and one random generator, and exposes the game operations as
    methods that replace the state in place.
    """

    # ##: All Actions.
    ACTIONS = ACTIONS

    def __init__(self, seed: int | None = None, mode: Mode = Mode.NORMAL, upgrade_rank: int = 1):
        """
        Initialize the game.

        Parameters
        ----------
        seed : int, optional
            Seed of the random generator, for reproducible games.
        mode : Mode, optional
            Initial play mode (default is ``Mode.NORMAL``).
        upgrade_rank : int, optional
            Rank of the tiles placed in reverse mode (default is 1).
        """
        self._upgrade_rank = upgrade_rank
        self._generator = default_rng(seed)
        self._state = new_game(generator=self._generator, mode=mode)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> ndarray:
        """Read-only view of the board of ranks."""
        view = self._state.board.view()
        view.flags.writeable = False
        return view

    @property
    def tiles(self) -> list[Tile]:
        return self._state.tiles

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def move_count(self) -> int:
        return self._state.move_count

    @property
    def elapsed(self) -> ElapsedTime:
        return self._state.elapsed

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def is_finished(self) -> bool:
        return self._state.is_finished

    def reset(self, seed: int | None = None) -> GameState:
        """
        Start a fresh normal game.

        Parameters
        ----------
        seed : int, optional
            When given, the random generator is re-seeded first.

        Returns
        -------
        GameState
            The new state.
        """
        if seed is not None:
            self._generator = default_rng(seed)
        self._state = restart(self._state, generator=self._generator)
        return self._state

    def step(self, direction: int) -> tuple[GameState, bool]:
        """
        Apply a direction.

        Returns
        -------
        tuple[GameState, bool]
            The new state and whether the move changed the board.
        """
        previous = self._state
        self._state = apply_direction(previous, direction, generator=self._generator)
        return self._state, self._state is not previous

    def upgrade(self, x: int, y: int) -> GameState:
        """Place a tile on ``(x, y)`` and let the engine move; see ``upgrade``."""
        self._state = upgrade(self._state, x, y, generator=self._generator, rank=self._upgrade_rank)
        return self._state

    def switch_mode(self) -> GameState:
        self._state = switch_mode(self._state, generator=self._generator)
        return self._state

    def tick(self) -> ElapsedTime:
        """Advance the elapsed time by one second."""
        self._state = advance_one_second(self._state)
        return self._state.elapsed

    def render(self) -> str:
        """Render the board with the score, moves and elapsed time."""
        header = f'Mode: {self.mode.value}  Score: {self.score}  Moves: {self.move_count}  Time: {self.elapsed}'
        return f'{header}\n{render_board(self._state.board)}'
