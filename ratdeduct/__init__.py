"""
RATDEDUCT - Rational Deduction Algorithms

Ratios are pairs of multisets of terms, read as "top over bot". They
compose like fractions: the bottom of one ratio cancels against the top
of the next, term by term, with multiset semantics.

Quick Start:
    from ratdeduct import RatioPair, compose

    compose([
        RatioPair(["a"], ["b"]),
        RatioPair(["b"], ["c"]),
    ])
    # => RatioPair(top=['a'], bot=['c'])

Trees:
    Expressions are nested lists (a list is a group, anything else an
    atom). A ratio is encoded as a group of two groups:

        try_from_tree([["a"], ["b"]])  # => RatioPair(top=['a'], bot=['b'])
        to_tree(RatioPair(["a"], ["b"]))  # => [['a'], ['b']]

Deduction:
    eval_composition([(ratio, {"X": "socrates"}), ...]) substitutes each
    ratio's bindings into its atoms, then composes the results.

Logging:
    Debug messages go through loguru and are disabled by default. Turn
    them on with logger.enable("ratdeduct").
"""

from loguru import logger

__version__ = "0.1.0"

from .multiset import (
    EquivalenceType,
    multiset_partition_by,
    multiset_symmetric_difference,
    multiset_symmetric_difference_by,
    has_intersection,
    has_intersection_by,
)

from .ratio import (
    RatioPair,
    RatioPairRef,
    register_ratio,
    is_ratio,
    new,
    cases,
    to_pair,
    from_pair,
    top,
    bot,
    top_ref,
    bot_ref,
    reverse,
    default,
    clone,
    eq_by,
    ratio_eq,
    pair_compose,
    pair_compose_by,
    compose,
    compose_by,
    has_cancellation,
    has_cancellation_by,
)

from .expr import (
    ExprType,
    AtomType,
    E,
    Substitution,
    is_atom,
    is_group,
    from_atom,
    from_group,
    children,
    substitute_iter_on_atoms,
)

from .tree import (
    RatioShapeError,
    NotGroup,
    BadGroupShape,
    MissingTopGroup,
    MissingBotGroup,
    MissingTopBotGroup,
    has_ratio_shape,
    try_from_tree,
    to_tree,
)

from .evaluate import (
    as_substitution,
    substitute,
    eval_composition,
)

from .trace import CompositionStep, CompositionTrace

logger.disable("ratdeduct")

# Public API
__all__ = [
    # Version
    "__version__",
    # Multisets
    "EquivalenceType",
    "multiset_partition_by",
    "multiset_symmetric_difference",
    "multiset_symmetric_difference_by",
    "has_intersection",
    "has_intersection_by",
    # Ratios
    "RatioPair",
    "RatioPairRef",
    "register_ratio",
    "is_ratio",
    "new",
    "cases",
    "to_pair",
    "from_pair",
    "top",
    "bot",
    "top_ref",
    "bot_ref",
    "reverse",
    "default",
    "clone",
    "eq_by",
    "ratio_eq",
    "pair_compose",
    "pair_compose_by",
    "compose",
    "compose_by",
    "has_cancellation",
    "has_cancellation_by",
    # Expressions
    "ExprType",
    "AtomType",
    "E",
    "Substitution",
    "is_atom",
    "is_group",
    "from_atom",
    "from_group",
    "children",
    "substitute_iter_on_atoms",
    # Trees
    "RatioShapeError",
    "NotGroup",
    "BadGroupShape",
    "MissingTopGroup",
    "MissingBotGroup",
    "MissingTopBotGroup",
    "has_ratio_shape",
    "try_from_tree",
    "to_tree",
    # Evaluation
    "as_substitution",
    "substitute",
    "eval_composition",
    # Tracing
    "CompositionStep",
    "CompositionTrace",
]
