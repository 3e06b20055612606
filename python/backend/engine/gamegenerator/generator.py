"""Generates solvable two-bucket puzzles."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.feasibility import is_solvable


@dataclass(frozen=True)
class Puzzle:
    capacity_a: int
    capacity_b: int
    target: int


class GameGenerator:
    """Draws random capacities and targets until a solvable one turns up."""

    @staticmethod
    def generate(max_capacity: int, rng: random.Random | None = None) -> Puzzle:
        """Return a random *solvable* puzzle with buckets up to *max_capacity*.

        The target is never zero, so the empty starting buckets are
        never already a solution.
        """
        if max_capacity < 1:
            raise ValueError(f"max_capacity must be at least 1, got {max_capacity}.")
        rng = rng or random.Random()

        while True:
            puzzle = GameGenerator._draw(max_capacity, rng)
            if is_solvable(puzzle.capacity_a, puzzle.capacity_b, puzzle.target):
                return puzzle

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _draw(max_capacity: int, rng: random.Random) -> Puzzle:
        a = rng.randint(1, max_capacity)
        b = rng.randint(1, max_capacity)
        target = rng.randint(1, max(a, b))
        return Puzzle(a, b, target)
