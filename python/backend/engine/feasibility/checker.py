"""Decides whether a two-bucket puzzle has a solution, without searching.

Every amount a single bucket can end up holding is of the form
``a*x + b*y`` for integers ``x`` and ``y`` (fills and empties of each
bucket).  That linear Diophantine equation has integer solutions exactly
when the right-hand side is a multiple of ``gcd(a, b)``.  On top of that
the target has to fit in one of the buckets, since the goal is checked
against individual bucket contents.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    ``gcd(a, 0) == a`` and ``gcd(0, b) == b``.
    """
    while b:
        a, b = b, a % b
    return a


def is_solvable(capacity_a: int, capacity_b: int, target: int) -> bool:
    """Return True if *target* can be measured with the two buckets."""
    verdict = _check(capacity_a, capacity_b, target)
    logger.debug(
        "Feasibility of (%d, %d) -> %d: %s", capacity_a, capacity_b, target, verdict
    )
    return verdict


def _check(capacity_a: int, capacity_b: int, target: int) -> bool:
    # Neither bucket can hold the target.
    if target > capacity_a and target > capacity_b:
        return False

    if capacity_a < 0 or capacity_b < 0 or target < 0:
        return False

    # Even buckets only ever hold even amounts.
    if capacity_a % 2 == 0 and capacity_b % 2 == 0 and target % 2 != 0:
        return False

    # With a zero bucket the other one must measure the target alone.
    # Two zero buckets only "hold" zero, which the empty root already does.
    if capacity_a == 0:
        if capacity_b == 0:
            return target == 0
        return target % capacity_b == 0
    if capacity_b == 0:
        return target % capacity_a == 0

    return target % gcd(capacity_a, capacity_b) == 0
