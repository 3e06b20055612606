"""Game session and puzzle generator tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.feasibility import is_solvable
from backend.engine.gamegenerator import GameGenerator, Puzzle
from backend.engine.gameplay import GamePlay
from backend.models.bucket import BucketState, Capacities, Move


# -- sessions -----------------------------------------------------------------


def test_new_game_starts_empty() -> None:
    game = GamePlay(5, 3, 4)
    assert game.buckets == BucketState(0, 0)
    assert game.state.moves == 0
    assert not game.is_won


def test_legal_moves_are_counted_and_recorded() -> None:
    game = GamePlay(5, 3, 4)
    assert game.move(Move.FILL_A)
    assert game.move(Move.POUR_A_INTO_B)
    assert game.buckets == BucketState(2, 3)
    assert game.buckets.label == "Pour 5L bucket into 3L bucket"
    assert game.state.moves == 2
    assert game.state.history == [BucketState(0, 0), BucketState(5, 0), BucketState(2, 3)]


def test_illegal_move_leaves_session_untouched() -> None:
    game = GamePlay(5, 3, 4)
    assert not game.move(Move.EMPTY_A)
    assert not game.move(Move.POUR_B_INTO_A)
    assert game.buckets == BucketState(0, 0)
    assert game.state.moves == 0
    assert len(game.state.history) == 1


def test_win_detection() -> None:
    game = GamePlay(5, 3, 4)
    for move in (
        Move.FILL_A, Move.POUR_A_INTO_B, Move.EMPTY_B,
        Move.POUR_A_INTO_B, Move.FILL_A, Move.POUR_A_INTO_B,
    ):
        assert not game.is_won
        assert game.move(move)
    assert game.is_won
    assert game.buckets == BucketState(4, 3)


def test_zero_target_is_won_immediately() -> None:
    assert GamePlay(5, 3, 0).is_won


def test_from_state() -> None:
    game = GamePlay.from_state(BucketState(5, 2), Capacities(5, 3), 4)
    assert game.move(Move.POUR_A_INTO_B)
    assert game.is_won
    assert game.state.moves == 1


def test_from_state_rejects_overfull_buckets() -> None:
    with pytest.raises(ValueError):
        GamePlay.from_state(BucketState(6, 0), Capacities(5, 3), 4)


# -- generator ----------------------------------------------------------------


def test_generated_puzzles_are_solvable_and_in_range() -> None:
    rng = random.Random(1234)
    for _ in range(200):
        puzzle = GameGenerator.generate(12, rng)
        assert 1 <= puzzle.capacity_a <= 12
        assert 1 <= puzzle.capacity_b <= 12
        assert 1 <= puzzle.target <= max(puzzle.capacity_a, puzzle.capacity_b)
        assert is_solvable(puzzle.capacity_a, puzzle.capacity_b, puzzle.target)


def test_same_seed_same_puzzle() -> None:
    first = GameGenerator.generate(50, random.Random(7))
    second = GameGenerator.generate(50, random.Random(7))
    assert first == second


def test_smallest_capacity() -> None:
    assert GameGenerator.generate(1, random.Random(0)) == Puzzle(1, 1, 1)


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(0)
