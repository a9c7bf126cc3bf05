from unittest import TestCase, main

import numpy as np

from puzzle2048.core.gamemove import (
    ACTIONS,
    Direction,
    auto_move,
    illegal_actions,
    latent_state,
    legal_actions,
    next_state,
)
from puzzle2048.core.tile import tiles

STABLE = np.arange(1, 17, dtype=np.int64).reshape(4, 4)


def single_tile(x: int, y: int, rank: int = 1) -> np.ndarray:
    board = np.zeros((4, 4), dtype=np.int64)
    board[x, y] = rank
    return board


class TestDirections(TestCase):
    def test_actions(self):
        self.assertEqual(ACTIONS["up"], Direction.UP)
        self.assertEqual(set(ACTIONS.values()), set(Direction))

    def test_single_tile_in_every_direction(self):
        """A lone tile travels to the matching edge."""
        expected = {
            Direction.UP: (1, 0),
            Direction.DOWN: (1, 3),
            Direction.LEFT: (0, 2),
            Direction.RIGHT: (3, 2),
        }
        for direction, position in expected.items():
            board, score, shifted = latent_state(single_tile(1, 2), direction)
            self.assertTrue(shifted)
            self.assertEqual(score, 0)
            np.testing.assert_array_equal(board, single_tile(*position))

    def test_left_merges_across_rows(self):
        """LEFT merges tiles sharing a column toward row 0."""
        board = single_tile(0, 1) + single_tile(2, 1)
        result, score, shifted = latent_state(board, Direction.LEFT)
        self.assertTrue(shifted)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, single_tile(0, 1, rank=2))

    def test_invalid_direction(self):
        with self.assertRaises(ValueError):
            latent_state(single_tile(0, 0), 7)

    def test_input_not_modified(self):
        board = single_tile(1, 2)
        latent_state(board, Direction.DOWN)
        np.testing.assert_array_equal(board, single_tile(1, 2))


class TestNextState(TestCase):
    def test_pair_merges_up(self):
        """[2, 2, _, _] moved up gives [4, _, _, _], 4 points, and one spawned tile."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [1, 1, 0, 0]

        outcome = next_state(board, Direction.UP, generator=np.random.default_rng(42))

        self.assertTrue(outcome.shifted)
        self.assertEqual(outcome.score, 4)
        self.assertEqual(outcome.board[0, 0], 2)
        self.assertIsNotNone(outcome.spawned)
        self.assertNotEqual((outcome.spawned.x, outcome.spawned.y), (0, 0))
        self.assertEqual(outcome.board[outcome.spawned.x, outcome.spawned.y], outcome.spawned.rank)
        self.assertEqual(np.count_nonzero(outcome.board), 2)

    def test_distinct_rows_do_not_shift(self):
        """[2, 4, 8, 16] rows moved up stay put: no score, no spawn."""
        board = np.tile(np.array([1, 2, 3, 4], dtype=np.int64), (4, 1))

        outcome = next_state(board, Direction.UP, generator=np.random.default_rng(0))

        self.assertFalse(outcome.shifted)
        self.assertEqual(outcome.score, 0)
        self.assertIsNone(outcome.spawned)
        np.testing.assert_array_equal(outcome.board, board)
        self.assertEqual(tiles(outcome.board), tiles(board))

    def test_full_row_cascades(self):
        """[2, 2, 2, 2] moved up on a full board gives [8, _, _, _] and 16 points."""
        board = STABLE.copy()
        board[0] = [1, 1, 1, 1]

        outcome = next_state(board, Direction.UP, generator=np.random.default_rng(1))

        self.assertTrue(outcome.shifted)
        self.assertEqual(outcome.score, 16)
        self.assertEqual(outcome.board[0, 0], 3)
        np.testing.assert_array_equal(outcome.board[1:], STABLE[1:])
        self.assertEqual(outcome.spawned.x, 0)
        self.assertIn(outcome.spawned.y, (1, 2, 3))

    def test_score_never_decreases(self):
        generator = np.random.default_rng(5)
        board = np.zeros((4, 4), dtype=np.int64)
        board[0, 0] = 1
        total = 0
        for _ in range(200):
            outcome = next_state(board, int(generator.integers(4)), generator=generator)
            self.assertGreaterEqual(outcome.score, 0)
            if not outcome.shifted:
                np.testing.assert_array_equal(outcome.board, board)
            total += outcome.score
            board = outcome.board
        self.assertGreaterEqual(total, 0)


class TestGameMove(TestCase):
    def test_illegal_actions(self):
        """
        Test if illegal actions are correctly identified.
        """
        illegal = illegal_actions(single_tile(0, 0))
        self.assertEqual(set(illegal), {Direction.UP, Direction.LEFT})

    def test_legal_actions(self):
        """
        Test if legal actions are correctly identified.
        """
        legal = legal_actions(single_tile(0, 0))
        self.assertEqual(set(legal), {Direction.DOWN, Direction.RIGHT})

    def test_no_legal_actions_on_stable_board(self):
        self.assertEqual(legal_actions(STABLE), [])
        self.assertEqual(set(illegal_actions(STABLE)), set(Direction))


class TestAutoMove(TestCase):
    def test_retries_until_shift(self):
        """Auto move always finds a direction that changes the board, without spawning."""
        for seed in range(10):
            outcome, direction = auto_move(single_tile(0, 0), generator=np.random.default_rng(seed))
            self.assertTrue(outcome.shifted)
            self.assertIn(direction, (Direction.DOWN, Direction.RIGHT))
            self.assertIsNone(outcome.spawned)
            self.assertEqual(np.count_nonzero(outcome.board), 1)

    def test_stuck_board(self):
        outcome, direction = auto_move(STABLE, generator=np.random.default_rng(0))
        self.assertFalse(outcome.shifted)
        self.assertIsNone(direction)
        np.testing.assert_array_equal(outcome.board, STABLE)


if __name__ == '__main__':
    main()
