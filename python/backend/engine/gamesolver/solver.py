"""Two-bucket puzzle solver."""

from __future__ import annotations

import logging

from backend.engine.feasibility import is_solvable
from backend.engine.gamesolver.config import SolverConfig
from backend.engine.graphsearch import bfs
from backend.engine.transitions import apply_move, is_goal, successors
from backend.models.bucket import BucketState, Capacities, Move
from backend.models.solution import Infeasible, Result, Solved

logger = logging.getLogger(__name__)


class SolverError(RuntimeError):
    """The search ran dry on a puzzle the feasibility check accepted."""


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        capacity_a: int,
        capacity_b: int,
        target: int,
        config: SolverConfig | None = None,
    ) -> Result:
        """Return a shortest solution, or ``Infeasible`` without searching.

        Raises ``SearchLimitExceeded`` when ``config.max_states`` is hit.
        """
        config = config or SolverConfig()
        capacities = Capacities(capacity_a, capacity_b)

        if not Solver.is_solvable(capacity_a, capacity_b, target):
            logger.info(
                "(%d, %d) -> %d is not solvable", capacity_a, capacity_b, target
            )
            return Infeasible(capacities, target)

        path = bfs(
            BucketState.empty(config.root_label),
            lambda state: is_goal(state, target),
            lambda state: successors(state, capacities),
            max_states=config.max_states,
        )
        if path is None:
            raise SolverError(
                f"No path found for ({capacity_a}, {capacity_b}) -> {target} "
                "although it passed the feasibility check."
            )

        logger.info(
            "(%d, %d) -> %d solved in %d moves",
            capacity_a,
            capacity_b,
            target,
            len(path) - 1,
        )
        return Solved(capacities, target, path)

    @staticmethod
    def hint(
        state: BucketState, capacities: Capacities, target: int
    ) -> Move | None:
        """Return the first move of a shortest solution from *state*.

        ``None`` if *state* already holds the target or no solution exists.
        The search runs from *state* itself, so this also works mid-game
        from states the feasibility check knows nothing about.
        """
        if is_goal(state, target):
            return None

        path = bfs(
            state,
            lambda s: is_goal(s, target),
            lambda s: successors(s, capacities),
        )
        if path is None:
            return None

        # first move in enumeration order producing the next amounts
        nxt = path[1]
        for move in Move:
            if apply_move(state, move, capacities) == nxt:
                return move
        return None

    @staticmethod
    def is_solvable(capacity_a: int, capacity_b: int, target: int) -> bool:
        """Return True if *target* can be measured with the two buckets."""
        return is_solvable(capacity_a, capacity_b, target)


def solve(
    capacity_a: int,
    capacity_b: int,
    target: int,
    *,
    max_states: int | None = None,
) -> Result:
    """Solve the puzzle starting from two empty buckets."""
    return Solver.solve(
        capacity_a, capacity_b, target, SolverConfig(max_states=max_states)
    )
