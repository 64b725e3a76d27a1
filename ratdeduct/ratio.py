"""
Ratio abstraction and the ratio monoid.

A ratio is a pair of multisets read as "top over bot". Any two-slot
container can act as a ratio once it is registered with
``register_ratio``; ``RatioPair`` and the plain 2-tuple ``(top, bot)`` are
registered here. All operations are module functions that dispatch on the
registered representation, so they work on either:

    from ratdeduct import RatioPair, pair_compose

    pair_compose(RatioPair(["a"], ["b"]), RatioPair(["b"], ["c"]))
    # => RatioPair(top=['a'], bot=['c'])

    pair_compose((["a"], ["b"]), (["b"], ["c"]))
    # => (['a'], ['c'])

Composition multiplies ratios like fractions: the denominator of the left
factor cancels against the numerator of the right factor, term by term,
with multiset semantics.
"""

from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple
from itertools import chain
import copy
import operator

from loguru import logger

from .multiset import EquivalenceType, has_intersection_by, multiset_partition_by
from .trace import CompositionStep, CompositionTrace


class RatioPairRef(NamedTuple):
    """Read-only view of the two sides of a ratio."""
    top: Any
    bot: Any


# new(top, bot) -> ratio, cases(ratio) -> RatioPairRef
NewType = Callable[[Any, Any], Any]
CasesType = Callable[[Any], RatioPairRef]

_REGISTRY: Dict[type, Tuple[NewType, CasesType]] = {}


def register_ratio(cls: type, new: NewType, cases: CasesType) -> type:
    """
    Make a container type usable as a ratio.

    Args:
        cls: The container type (subclasses are covered too)
        new: Builds an instance from (top, bot)
        cases: Returns a RatioPairRef view of an instance

    Returns:
        cls, so this can wrap a class definition
    """
    _REGISTRY[cls] = (new, cases)
    return cls


def _lookup(cls: type) -> Tuple[NewType, CasesType]:
    for base in cls.__mro__:
        if base in _REGISTRY:
            return _REGISTRY[base]
    raise TypeError(f"{cls.__name__} is not a registered ratio type")


def is_ratio(obj: Any) -> bool:
    """Check if obj is an instance of a registered ratio type."""
    try:
        cases(obj)
    except TypeError:
        return False
    return True


# ============================================================
# Accessors
# ============================================================

def new(kind: type, top: Any, bot: Any) -> Any:
    """Create a ratio of the given representation. No validation is done."""
    return _lookup(kind)[0](top, bot)


def cases(ratio: Any) -> RatioPairRef:
    """View the top and bottom of a ratio."""
    return _lookup(type(ratio))[1](ratio)


def to_pair(ratio: Any) -> 'RatioPair':
    """Convert any ratio into the canonical RatioPair."""
    if isinstance(ratio, RatioPair):
        return ratio
    view = cases(ratio)
    return RatioPair(view.top, view.bot)


def from_pair(kind: type, pair: 'RatioPair') -> Any:
    """Convert a RatioPair into the given representation."""
    return new(kind, pair.top, pair.bot)


def top(ratio: Any) -> Any:
    """Take the top (numerator) of a ratio."""
    return to_pair(ratio).top


def bot(ratio: Any) -> Any:
    """Take the bottom (denominator) of a ratio."""
    return to_pair(ratio).bot


def top_ref(ratio: Any) -> Any:
    return cases(ratio).top


def bot_ref(ratio: Any) -> Any:
    return cases(ratio).bot


def reverse(ratio: Any) -> Any:
    """Swap top and bottom."""
    view = cases(ratio)
    return new(type(ratio), view.bot, view.top)


def default(kind: type, container: type = list) -> Any:
    """The empty ratio, the identity of composition."""
    return new(kind, container(), container())


def clone(ratio: Any) -> Any:
    """Deep copy both sides of a ratio."""
    view = cases(ratio)
    return new(type(ratio), copy.deepcopy(view.top), copy.deepcopy(view.bot))


# ============================================================
# Equality
# ============================================================

def _side_items(side: Any) -> List:
    """
    List the terms of one side of a ratio.

    Raises:
        TypeError: If side is a string or is not iterable
    """
    if isinstance(side, (str, bytes)):
        raise TypeError("a ratio side must be a multiset, not a string")
    return list(side)


def _sides_eq(left: Iterable, right: Iterable, eq: EquivalenceType) -> bool:
    left = _side_items(left)
    right = _side_items(right)
    if len(left) != len(right):
        return False
    return all(eq(a, b) for a, b in zip(left, right))


def eq_by(ratio: Any, other: Any, eq: EquivalenceType) -> bool:
    """
    Compare two ratios top-to-top and bot-to-bot.

    Sides are compared item by item, in order, with ``eq``. The two
    ratios may use different representations.
    """
    a = cases(ratio)
    b = cases(other)
    return _sides_eq(a.top, b.top, eq) and _sides_eq(a.bot, b.bot, eq)


def ratio_eq(ratio: Any, other: Any) -> bool:
    """Compare two ratios using ``==`` on their terms."""
    return eq_by(ratio, other, operator.eq)


# ============================================================
# Composition
# ============================================================

def _collect(like: Any, items: Iterable) -> Any:
    """Build a multiset of the same container type as ``like``."""
    return type(like)(items)


def _pair_compose(left: Any, right: Any, eq: EquivalenceType) -> Tuple[Any, List]:
    lhs = cases(left)
    rhs = cases(right)
    lower, cancelled, upper = multiset_partition_by(lhs.bot, rhs.top, eq)
    result = new(
        type(left),
        _collect(lhs.top, chain(upper, lhs.top)),
        _collect(lhs.bot, chain(lower, rhs.bot)),
    )
    if cancelled:
        logger.debug(f"Composition cancelled {len(cancelled)} term(s): {cancelled!r}")
    return result, cancelled


def pair_compose_by(left: Any, right: Any, eq: EquivalenceType) -> Any:
    """
    Compose two ratios using the ratio monoid multiplication.

    The bottom of ``left`` and the top of ``right`` cancel as multisets.
    The result is:

        top = (right.top residue) + left.top
        bot = (left.bot residue) + right.bot

    The result has the representation of ``left``; neither input is
    modified.

    Args:
        left: Left factor
        right: Right factor
        eq: Term equivalence, called as eq(left_bot_term, right_top_term)
    """
    return _pair_compose(left, right, eq)[0]


def pair_compose(left: Any, right: Any) -> Any:
    """Compose two ratios, cancelling terms that are ``==``."""
    return pair_compose_by(left, right, operator.eq)


def compose_by(
    ratios: Iterable,
    eq: EquivalenceType,
    kind: Optional[type] = None,
    container: type = list,
    trace: bool = False,
):
    """
    Left-fold a sequence of ratios with ``pair_compose_by``.

    The first ratio seeds the fold. An empty sequence yields the empty
    ratio of ``kind`` (RatioPair by default) with ``container`` sides.

    Args:
        ratios: Ratios to compose, left to right
        eq: Term equivalence
        kind: Representation of the empty result
        container: Multiset type of the empty result
        trace: If True, return (result, CompositionTrace)

    Returns:
        The composed ratio, or (ratio, trace) when trace=True
    """
    history = CompositionTrace() if trace else None
    result = None
    for index, ratio in enumerate(ratios):
        if index == 0:
            result = ratio
            if history is not None:
                history.initial = cases(ratio)
            continue
        after, cancelled = _pair_compose(result, ratio, eq)
        if history is not None:
            history.add_step(CompositionStep(
                index, cases(result), cases(ratio), cases(after), cancelled))
        result = after

    if result is None:
        result = default(kind or RatioPair, container)
        if history is not None:
            history.initial = cases(result)
    if history is not None:
        history.final = cases(result)
        return result, history
    return result


def compose(ratios: Iterable, kind: Optional[type] = None, container: type = list, trace: bool = False):
    """Left-fold a sequence of ratios with ``pair_compose``."""
    return compose_by(ratios, operator.eq, kind=kind, container=container, trace=trace)


def has_cancellation_by(left: Any, right: Any, eq: EquivalenceType) -> bool:
    """
    Check if composing two ratios would cancel anything.

    True when the bottom of ``left`` meets the top of ``right``, or the top
    of ``left`` meets the bottom of ``right``. Nothing is composed.
    """
    lhs = cases(left)
    rhs = cases(right)
    return has_intersection_by(lhs.bot, rhs.top, eq) or has_intersection_by(lhs.top, rhs.bot, eq)


def has_cancellation(left: Any, right: Any) -> bool:
    """``has_cancellation_by`` using ``==``."""
    return has_cancellation_by(left, right, operator.eq)


# ============================================================
# Representations
# ============================================================

class RatioPair:
    """
    Canonical ratio type with ``top`` and ``bot`` attributes.

    RatioPair unpacks like a tuple and compares equal to any ratio with
    the same terms, whatever its representation:

        pair = RatioPair(["a"], ["b"])
        top, bot = pair
        pair == (["a"], ["b"])   # => True
        pair.reverse()           # => RatioPair(top=['b'], bot=['a'])
    """

    __slots__ = ('top', 'bot')

    def __init__(self, top: Any = None, bot: Any = None):
        self.top = [] if top is None else top
        self.bot = [] if bot is None else bot

    def __iter__(self):
        yield self.top
        yield self.bot

    def __eq__(self, other):
        if not is_ratio(other):
            return NotImplemented
        try:
            return ratio_eq(self, other)
        except TypeError:
            return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"RatioPair(top={self.top!r}, bot={self.bot!r})"

    def cases(self) -> RatioPairRef:
        return RatioPairRef(self.top, self.bot)

    def reverse(self) -> 'RatioPair':
        return reverse(self)

    def clone(self) -> 'RatioPair':
        return clone(self)

    def eq_by(self, other: Any, eq: EquivalenceType) -> bool:
        return eq_by(self, other, eq)

    def has_cancellation(self, other: Any, eq: Optional[EquivalenceType] = None) -> bool:
        """Check if composing self with other would cancel anything."""
        return has_cancellation_by(self, other, eq or operator.eq)

    def __mul__(self, other):
        if not is_ratio(other):
            return NotImplemented
        return pair_compose(self, other)

    @classmethod
    def new(cls, top: Any, bot: Any) -> 'RatioPair':
        return cls(top, bot)

    @classmethod
    def from_pair(cls, pair: 'RatioPair') -> 'RatioPair':
        return from_pair(cls, pair)

    @classmethod
    def default(cls, container: type = list) -> 'RatioPair':
        return default(cls, container)

    @classmethod
    def pair_compose(cls, left: Any, right: Any,
                     eq: Optional[EquivalenceType] = None) -> 'RatioPair':
        """Compose two ratios into a RatioPair."""
        return to_pair(pair_compose_by(left, right, eq or operator.eq))

    @classmethod
    def compose(cls, ratios: Iterable, eq: Optional[EquivalenceType] = None,
                trace: bool = False):
        """Compose a sequence of ratios into a RatioPair."""
        return compose_by((to_pair(r) for r in ratios), eq or operator.eq,
                          kind=cls, trace=trace)


def _tuple_cases(ratio: tuple) -> RatioPairRef:
    if len(ratio) != 2:
        raise TypeError(f"a ratio tuple must have 2 items, got {len(ratio)}")
    return RatioPairRef(ratio[0], ratio[1])


register_ratio(RatioPair, RatioPair, RatioPair.cases)
register_ratio(RatioPairRef, RatioPairRef, lambda view: view)
register_ratio(tuple, lambda t, b: (t, b), _tuple_cases)
