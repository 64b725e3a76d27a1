"""
Conversion between expression trees and ratios.

A tree has ratio shape when it is a group of exactly two groups. The
children of the first group are the top terms, the children of the
second are the bottom terms:

    try_from_tree([["a"], ["b", "c"]])  # => RatioPair(top=['a'], bot=['b', 'c'])
    to_tree(RatioPair(["a"], ["b"]))    # => [['a'], ['b']]
"""

from typing import Any, Optional

from loguru import logger

from .expr import ExprType, children, from_group, is_group
from .ratio import RatioPair, cases, new


class RatioShapeError(ValueError):
    """A tree does not have the group-of-two-groups shape of a ratio."""

    message = "expression does not have ratio shape"

    def __init__(self, tree: ExprType = None):
        super().__init__(f"{self.message}: {tree!r}")
        self.tree = tree


class NotGroup(RatioShapeError):
    """The expression is an atom."""
    message = "expression is not a group"


class BadGroupShape(RatioShapeError):
    """The group does not have exactly two children."""
    message = "ratio group must have exactly two children"


class MissingTopGroup(RatioShapeError):
    """The top child is an atom."""
    message = "top of ratio is not a group"


class MissingBotGroup(RatioShapeError):
    """The bottom child is an atom."""
    message = "bottom of ratio is not a group"


class MissingTopBotGroup(RatioShapeError):
    """Both children are atoms."""
    message = "top and bottom of ratio are not groups"


def _shape_error(tree: ExprType) -> Optional[type]:
    """Return the RatioShapeError subclass describing tree, or None if well shaped."""
    if not is_group(tree):
        return NotGroup
    if len(tree) != 2:
        return BadGroupShape
    top_ok, bot_ok = is_group(tree[0]), is_group(tree[1])
    if top_ok and bot_ok:
        return None
    if bot_ok:
        return MissingTopGroup
    if top_ok:
        return MissingBotGroup
    return MissingTopBotGroup


def has_ratio_shape(tree: ExprType) -> bool:
    """
    Check if a tree can be read as a ratio.

    Use try_from_tree to do the conversion.
    """
    return _shape_error(tree) is None


def try_from_tree(tree: ExprType, kind: type = RatioPair) -> Any:
    """
    Read a ratio out of a tree.

    Args:
        tree: A group of two groups
        kind: Ratio representation to build (RatioPair or tuple)

    Returns:
        A ratio whose sides are lists of the child groups' children

    Raises:
        NotGroup: tree is an atom
        BadGroupShape: tree does not have exactly two children
        MissingTopGroup: the first child is an atom
        MissingBotGroup: the second child is an atom
        MissingTopBotGroup: both children are atoms
    """
    error = _shape_error(tree)
    if error is not None:
        logger.debug(f"Rejected ratio tree ({error.__name__}): {tree!r}")
        raise error(tree)
    top_group, bot_group = children(tree)
    return new(kind, from_group(children(top_group)), from_group(children(bot_group)))


def to_tree(ratio: Any) -> ExprType:
    """Encode a ratio as a group of two groups. Never fails."""
    view = cases(ratio)
    return from_group([from_group(view.top), from_group(view.bot)])
