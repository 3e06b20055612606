"""Move rules for the two-bucket puzzle: successors and goal test."""

from __future__ import annotations

from backend.models.bucket import BucketState, Capacities, Move


def apply_move(
    state: BucketState, move: Move, capacities: Capacities
) -> BucketState | None:
    """Return the state *move* leads to, or ``None`` if its guard fails.

    Pours stop as soon as the source is empty or the destination full.
    """
    a, b = state.a, state.b
    cap_a, cap_b = capacities.a, capacities.b
    label = move.describe(capacities)

    if move is Move.POUR_B_INTO_A:
        if a < cap_a and b > 0:
            partial = min(b, cap_a - a)
            return BucketState(a + partial, b - partial, label)
    elif move is Move.POUR_A_INTO_B:
        if b < cap_b and a > 0:
            partial = min(a, cap_b - b)
            return BucketState(a - partial, b + partial, label)
    elif move is Move.EMPTY_A:
        if a > 0:
            return BucketState(0, b, label)
    elif move is Move.EMPTY_B:
        if b > 0:
            return BucketState(a, 0, label)
    elif move is Move.FILL_A:
        if a < cap_a:
            return BucketState(cap_a, b, label)
    elif move is Move.FILL_B:
        if b < cap_b:
            return BucketState(a, cap_b, label)
    return None


def successors(state: BucketState, capacities: Capacities) -> list[BucketState]:
    """Every state one legal move away, in ``Move`` declaration order.

    The order matters: breadth-first search breaks ties between equally
    short solutions by it.
    """
    result: list[BucketState] = []
    for move in Move:
        nxt = apply_move(state, move, capacities)
        if nxt is not None:
            result.append(nxt)
    return result


def is_goal(state: BucketState, target: int) -> bool:
    return state.contains(target)
