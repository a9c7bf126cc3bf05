# -*- coding: utf-8 -*-
"""
Play 2048 in the console.
"""
import logging
import time
from argparse import ArgumentParser
from typing import Callable, Sequence

from puzzle2048.config import GameConfig
from puzzle2048.envs import Game, Mode
from puzzle2048.errors import GameError

_logger = logging.getLogger(__name__)

# ##: Keys accepted for each direction.
KEYS = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
}

HELP = "w/a/s/d: move, u X Y: place a tile (reverse mode), m: switch mode, r: restart, q: quit"


def redraw(game: Game, output: Callable[[str], None] = print):
    """
    Redraw the game board.

    Parameters
    ----------
    game: Game
        The game to draw

    output: Callable
        Function receiving the rendered text
    """
    output(game.render())
    if game.is_finished:
        output("Game over!")


def advance_clock(game: Game, last_tick: float, now: float, tick_seconds: float = 1.0) -> float:
    """
    Feed the game one tick per full period elapsed since the last tick.

    Parameters
    ----------
    game: Game
        The game whose clock advances

    last_tick: float
        Time of the last tick

    now: float
        Current time

    tick_seconds: float
        Length of one tick

    Returns
    -------
    float
        Time of the last tick after catching up
    """
    while now - last_tick >= tick_seconds:
        game.tick()
        last_tick += tick_seconds
    return last_tick


def key_handler(game: Game, command: str, output: Callable[[str], None] = print) -> bool:
    """
    Handle one command typed by the player.

    Parameters
    ----------
    game: Game
        The game

    command: str
        Command to handle

    output: Callable
        Function receiving the messages for the player

    Returns
    -------
    bool
        False when the player asked to quit
    """
    words = command.strip().lower().split()
    if not words:
        return True
    key = KEYS.get(words[0], words[0])

    if key in ("q", "quit", "escape"):
        return False

    try:
        if key in ("r", "restart", "backspace"):
            game.reset()
        elif key in ("m", "mode"):
            game.switch_mode()
        elif key in ("u", "upgrade"):
            if len(words) != 3:
                raise ValueError("usage: u X Y")
            game.upgrade(int(words[1]), int(words[2]))
        elif key in game.ACTIONS:
            _, shifted = game.step(game.ACTIONS[key])
            if not shifted:
                output("Nothing moved.")
        else:
            output(HELP)
            return True
    except (GameError, ValueError) as error:
        output(f"Rejected: {error}")
        return True

    redraw(game, output)
    return True


def main(argv: Sequence[str] | None = None):
    """Run an interactive game until the player quits."""
    parser = ArgumentParser(description="Play 2048 in the console.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--mode", type=str, default=Mode.NORMAL.value, choices=[mode.value for mode in Mode])
    parser.add_argument("--log-level", type=str, default="WARNING")
    config = GameConfig.from_args(parser.parse_args(argv))

    logging.basicConfig(level=config.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    _logger.info("Starting game with %s", config)

    game = Game(seed=config.seed, mode=config.mode, upgrade_rank=config.upgrade_rank)
    print(HELP)
    redraw(game)

    last_tick = time.monotonic()
    while True:
        try:
            command = input("> ")
        except EOFError:
            break
        last_tick = advance_clock(game, last_tick, time.monotonic(), config.tick_seconds)
        if not key_handler(game, command):
            break

    print(f"Final score: {game.score}")


if __name__ == "__main__":
    main()
