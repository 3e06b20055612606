"""Solver settings."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.bucket import INITIAL_LABEL


@dataclass(frozen=True)
class SolverConfig:
    """Knobs for a single solve.

    Attributes:
        max_states: Cap on distinct states the search may discover.
            ``None`` searches the whole reachable space, which holds at
            most ``(capacity_a + 1) * (capacity_b + 1)`` states.
        root_label: Label shown for the starting, empty-buckets state.
    """

    max_states: int | None = None
    root_label: str = INITIAL_LABEL

    def __post_init__(self) -> None:
        if self.max_states is not None and self.max_states < 1:
            raise ValueError(f"max_states must be positive, got {self.max_states}.")
