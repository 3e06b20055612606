"""Blind breadth-first search over an implicitly defined state graph.

Only the root is given up front.  Neighbours are discovered on demand by
a *transitions* callable and the search stops at the first state the
*goal* callable accepts.  Nothing here knows about buckets: any hashable
state type works.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Hashable, Iterable, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)

Goal = Callable[[S], bool]
Transitions = Callable[[S], Iterable[S]]


class SearchLimitExceeded(RuntimeError):
    """Raised when a search discovers more states than it was allowed."""

    def __init__(self, limit: int, explored: int) -> None:
        super().__init__(
            f"Search gave up after discovering {explored} states (limit {limit})."
        )
        self.limit = limit
        self.explored = explored


def bfs(
    root: S,
    goal: Goal[S],
    transitions: Transitions[S],
    *,
    max_states: int | None = None,
) -> tuple[S, ...] | None:
    """Return the shortest path from *root* to a goal state, or ``None``.

    The path is ordered root first and includes both ends, so a root that
    already satisfies *goal* yields ``(root,)``.  When several goals sit
    at the same depth the first one discovered wins, which follows the
    order *transitions* yields successors in.

    Each state is recorded with its parent the first time it is seen and
    never re-queued, so regenerated states and self-loops are harmless.

    Raises ``SearchLimitExceeded`` if *max_states* is set and more than
    that many distinct states are discovered.
    """
    # parent back-references double as the visited set
    parents: dict[S, S | None] = {root: None}
    frontier: deque[S] = deque([root])

    while frontier:
        state = frontier.popleft()
        if goal(state):
            logger.debug("Goal reached after discovering %d states", len(parents))
            return _path_to(state, parents)

        for successor in transitions(state):
            if successor in parents:
                continue
            parents[successor] = state
            if max_states is not None and len(parents) > max_states:
                raise SearchLimitExceeded(max_states, len(parents))
            frontier.append(successor)

    logger.debug("State space exhausted after %d states, no goal", len(parents))
    return None


def _path_to(state: S, parents: dict[S, S | None]) -> tuple[S, ...]:
    path: list[S] = []
    node: S | None = state
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return tuple(path)
