"""
Configuration of a console game session.
"""

from argparse import Namespace
from dataclasses import dataclass

from puzzle2048.envs.state import Mode


@dataclass
class GameConfig:
    """
    Settings of an interactive game.

    Attributes are filled from the command line by ``from_args``.
    """

    seed: int | None = None  # Seed of the random generator, None for fresh entropy
    mode: Mode = Mode.NORMAL  # Initial play mode
    upgrade_rank: int = 1  # Rank of the tiles placed in reverse mode
    tick_seconds: float = 1.0  # Wall-clock seconds per elapsed-time tick
    log_level: str = 'WARNING'

    def __post_init__(self):
        self.mode = Mode(self.mode)
        if self.upgrade_rank < 1:
            raise ValueError(f'upgrade_rank must be >= 1, got {self.upgrade_rank}')
        if self.tick_seconds <= 0:
            raise ValueError(f'tick_seconds must be > 0, got {self.tick_seconds}')
        self.log_level = self.log_level.upper()

    @classmethod
    def from_args(cls, args: Namespace) -> 'GameConfig':
        """Build the configuration from parsed command-line arguments."""
        return cls(seed=args.seed, mode=Mode(args.mode), log_level=args.log_level)
