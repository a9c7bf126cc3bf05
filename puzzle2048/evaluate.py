# -*- coding: utf-8 -*-
"""
Evaluate the random player over many games.
"""
import logging
from collections import Counter

from numpy.random import Generator, default_rng
from tqdm import trange

from puzzle2048.core.gamemove import legal_actions
from puzzle2048.core.geometry import max_rank
from puzzle2048.envs import GameState, apply_direction, new_game

_logger = logging.getLogger(__name__)


def play_random(generator: Generator, max_moves: int = 100_000) -> GameState:
    """
    Play one normal game picking a random legal direction every turn.

    Parameters
    ----------
    generator : Generator
        Random generator used for the spawns and the directions.
    max_moves : int, optional
        Safety cap on the number of moves.

    Returns
    -------
    GameState
        The final state, finished unless the cap was reached.
    """
    state = new_game(generator=generator)
    for _ in range(max_moves):
        legal = legal_actions(state.board)
        if not legal:
            break
        direction = legal[int(generator.integers(len(legal)))]
        state = apply_direction(state, direction, generator=generator)
    return state


def evaluate(length: int = 10, seed: int | None = None) -> dict[int, int]:
    """
    Play several random games.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the random generator.

    Returns
    -------
    dict[int, int]
        How many games ended with each maximum tile value.
    """
    generator = default_rng(seed)
    best = []

    with trange(length) as period:
        for num in period:
            state = play_random(generator)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=state.score, moves=state.move_count)
            _logger.debug("Game %d: score=%d, moves=%d", num + 1, state.score, state.move_count)

            # ##: Save max cells.
            best.append(2 ** max_rank(state.board))

    return dict(Counter(best))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    result = evaluate(length=args.games, seed=args.seed)
    print(f"Random player over {args.games} games, max tile frequency: {dict(sorted(result.items()))}")
