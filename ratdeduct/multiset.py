"""
Multiset primitives for ratio composition.

Multisets are plain Python sequences: order is kept for deterministic
output, duplicates are significant. Every function takes an optional
equivalence predicate so callers can cancel terms that are "the same"
without being equal under ``==``.
"""

from typing import Any, Callable, Iterable, List, Sequence, Tuple
import operator

# Element equivalence predicate: eq(left_item, right_item) -> bool
EquivalenceType = Callable[[Any, Any], bool]


def multiset_partition_by(
    left: Iterable,
    right: Sequence,
    eq: EquivalenceType,
) -> Tuple[List, List, List]:
    """
    Pair off equivalent items of two multisets.

    Each left item is checked against the right items in order and
    consumes the first unconsumed right item it is equivalent to. A right
    slot is consumed at most once, so one occurrence cancels one
    occurrence.

    Args:
        left: Left multiset
        right: Right multiset (scanned once per left item)
        eq: Equivalence predicate called as eq(left_item, right_item)

    Returns:
        (left_only, cancelled, right_only) where cancelled holds the left
        items that were paired off, in left order.
    """
    right = list(right)
    consumed = [False] * len(right)
    left_only = []
    cancelled = []
    for item in left:
        for i, other in enumerate(right):
            if not consumed[i] and eq(item, other):
                consumed[i] = True
                cancelled.append(item)
                break
        else:
            left_only.append(item)
    right_only = [other for other, used in zip(right, consumed) if not used]
    return left_only, cancelled, right_only


def multiset_symmetric_difference_by(
    left: Iterable,
    right: Sequence,
    eq: EquivalenceType,
) -> Tuple[List, List]:
    """
    Compute the symmetric difference of two multisets.

    Examples:
        multiset_symmetric_difference_by(["a", "b"], ["b", "c"], operator.eq)
            -> (["a"], ["c"])
        multiset_symmetric_difference_by(["x", "x"], ["x"], operator.eq)
            -> (["x"], [])

    Returns:
        (left_only, right_only)
    """
    left_only, _, right_only = multiset_partition_by(left, right, eq)
    return left_only, right_only


def multiset_symmetric_difference(left: Iterable, right: Sequence) -> Tuple[List, List]:
    """Symmetric difference of two multisets using ``==``."""
    return multiset_symmetric_difference_by(left, right, operator.eq)


def has_intersection_by(left: Iterable, right: Sequence, eq: EquivalenceType) -> bool:
    """Check if any left item is equivalent to any right item."""
    right = list(right)
    return any(eq(item, other) for item in left for other in right)


def has_intersection(left: Iterable, right: Sequence) -> bool:
    """Check if two multisets share an element under ``==``."""
    return has_intersection_by(left, right, operator.eq)
