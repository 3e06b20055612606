"""Bucket model for the two-bucket pouring puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

INITIAL_LABEL = "Initial state"


class Move(StrEnum):
    """The six atomic moves, in the order successors are enumerated."""

    POUR_B_INTO_A = "pour_b_into_a"
    POUR_A_INTO_B = "pour_a_into_b"
    EMPTY_A = "empty_a"
    EMPTY_B = "empty_b"
    FILL_A = "fill_a"
    FILL_B = "fill_b"

    def describe(self, capacities: Capacities) -> str:
        """Human label for this move, e.g. ``"Fill 5L bucket"``.

        Equal-sized buckets are told apart by name: ``"Fill 3L bucket A"``.
        """
        a = f"{capacities.a}L bucket"
        b = f"{capacities.b}L bucket"
        if capacities.a == capacities.b:
            a, b = f"{a} A", f"{b} B"
        return {
            Move.POUR_B_INTO_A: f"Pour {b} into {a}",
            Move.POUR_A_INTO_B: f"Pour {a} into {b}",
            Move.EMPTY_A: f"Empty {a}",
            Move.EMPTY_B: f"Empty {b}",
            Move.FILL_A: f"Fill {a}",
            Move.FILL_B: f"Fill {b}",
        }[self]


@dataclass(frozen=True)
class Capacities:
    """Fixed sizes of the two buckets for one solve."""

    a: int
    b: int

    def holds(self, state: BucketState) -> bool:
        """Check that both amounts of *state* fit their buckets."""
        return 0 <= state.a <= self.a and 0 <= state.b <= self.b


@dataclass(frozen=True)
class BucketState:
    """Amount of water in each bucket.

    ``label`` names the move that produced the state.  It is excluded
    from equality and hashing so two states with the same amounts are
    the same search node regardless of how they were reached.
    """

    a: int
    b: int
    label: str = field(default=INITIAL_LABEL, compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, label: str = INITIAL_LABEL) -> BucketState:
        return cls(0, 0, label)

    # -- queries --------------------------------------------------------------

    def contains(self, amount: int) -> bool:
        """Check if either bucket holds exactly *amount*."""
        return self.a == amount or self.b == amount

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        return f"[{self.a},{self.b}]"

    def to_verbose(self) -> str:
        return f"{self.label} leaving {self}"
