"""Solve results: either an unsolvable verdict or a shortest path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from backend.models.bucket import BucketState, Capacities

UNSOLVABLE_MESSAGE = "Provided bucket size and solution size is not solvable"


@dataclass(frozen=True)
class Infeasible:
    """The target cannot be measured with these buckets."""

    capacities: Capacities
    target: int

    solvable = False

    def concise(self) -> str:
        return UNSOLVABLE_MESSAGE + "\n"

    def verbose(self) -> str:
        return UNSOLVABLE_MESSAGE + "\n"


@dataclass(frozen=True)
class Solved:
    """A shortest sequence of states from the empty buckets to the target.

    ``path`` always starts with the root state and ends with a state in
    which one bucket holds ``target``.  A target already present at the
    root gives a one-state path.
    """

    capacities: Capacities
    target: int
    path: tuple[BucketState, ...]

    solvable = True

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A solved path holds at least the root state.")

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.path) - 1

    @property
    def final_state(self) -> BucketState:
        return self.path[-1]

    # -- rendering ------------------------------------------------------------

    def concise(self) -> str:
        """One ``[a,b]`` line per state, machine friendly."""
        return "".join(f"{state}\n" for state in self.path)

    def verbose(self) -> str:
        """One ``<move> leaving [a,b]`` line per state, human friendly."""
        return "".join(f"{state.to_verbose()}\n" for state in self.path)


Result = Union[Infeasible, Solved]
