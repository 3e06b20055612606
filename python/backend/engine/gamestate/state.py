"""Tracks the mutable state of a puzzle session in progress."""

from __future__ import annotations

from backend.models.bucket import BucketState


class GameState:
    """Holds the current buckets, the states visited so far and the move count."""

    def __init__(self, buckets: BucketState) -> None:
        self.history: list[BucketState] = [buckets]
        self.moves: int = 0

    @property
    def buckets(self) -> BucketState:
        return self.history[-1]

    # -- moves ----------------------------------------------------------------

    def advance(self, buckets: BucketState) -> None:
        self.history.append(buckets)
        self.moves += 1
