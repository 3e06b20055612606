"""Core gameplay logic — applies moves and checks the win condition."""

from __future__ import annotations

from backend.engine.gamestate import GameState
from backend.engine.transitions import apply_move, is_goal
from backend.models.bucket import BucketState, Capacities, Move


class GamePlay:
    """Orchestrates a single puzzle session, starting from empty buckets."""

    def __init__(self, capacity_a: int, capacity_b: int, target: int) -> None:
        self.capacities = Capacities(capacity_a, capacity_b)
        self.target = target
        self.state = GameState(BucketState.empty())

    @classmethod
    def from_state(
        cls, buckets: BucketState, capacities: Capacities, target: int
    ) -> "GamePlay":
        """Create a session from an existing state (e.g. mid-solution)."""
        if not capacities.holds(buckets):
            raise ValueError(f"{buckets} does not fit buckets of {capacities}.")
        obj = object.__new__(cls)
        obj.capacities = capacities
        obj.target = target
        obj.state = GameState(buckets)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Apply *move* to the current buckets.

        Returns True if the move was legal.  Illegal moves (e.g. filling
        a full bucket) leave the session untouched and are not counted.
        """
        nxt = apply_move(self.state.buckets, move, self.capacities)
        if nxt is None:
            return False
        self.state.advance(nxt)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def buckets(self) -> BucketState:
        return self.state.buckets

    @property
    def is_won(self) -> bool:
        return is_goal(self.state.buckets, self.target)
