"""
Substitution and evaluation of ratio compositions.

A deduction step takes the ratios of a rule, instantiates each with its
own bindings, and composes the results:

    from ratdeduct import RatioPair, eval_composition

    rule = [
        (RatioPair([["mortal", "X"]], [["man", "X"]]), {"X": "socrates"}),
        (RatioPair([["man", "socrates"]], []), {}),
    ]
    eval_composition(rule)
    # => RatioPair(top=[['mortal', 'socrates']], bot=[])
"""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union
import operator

from .expr import SubstitutionFunc, Substitution, substitute as substitute_expr
from .multiset import EquivalenceType
from .ratio import RatioPair, cases, compose_by, new

# A substitution context: a function over atoms or an atom lookup table
ContextType = Union[SubstitutionFunc, Mapping]


def as_substitution(context: ContextType) -> SubstitutionFunc:
    """
    Turn a substitution context into a function over atoms.

    Callables are used as-is. Mappings are wrapped in Substitution, so
    unbound atoms stay unchanged. None means the identity substitution.
    """
    if context is None:
        return Substitution()
    if callable(context):
        return context
    if isinstance(context, Mapping):
        return Substitution(context)
    raise TypeError(f"substitution context must be callable or a mapping, got {type(context).__name__}")


def substitute(ratio: Any, f: ContextType) -> Any:
    """
    Substitute f(atom) for every atom of every term of a ratio.

    Top terms are visited before bottom terms, each left to right, so a
    stateful f sees atoms in a fixed order. The term count of each side
    is unchanged.

    Returns:
        A new ratio of the same representation
    """
    f = as_substitution(f)
    view = cases(ratio)
    top = type(view.top)(substitute_expr(term, f) for term in view.top)
    bot = type(view.bot)(substitute_expr(term, f) for term in view.bot)
    return new(type(ratio), top, bot)


def eval_composition(
    terms: Iterable[Tuple[Any, ContextType]],
    eq: Optional[EquivalenceType] = None,
    kind: type = RatioPair,
    trace: bool = False,
):
    """
    Evaluate a composition: substitute into each ratio, then compose.

    Args:
        terms: (ratio, context) pairs; each context instantiates its ratio
        eq: Term equivalence for cancellation (default ``==``)
        kind: Representation of the empty result
        trace: If True, return (result, CompositionTrace)

    Returns:
        The composed ratio, or (ratio, trace) when trace=True
    """
    instantiated = (substitute(ratio, context) for ratio, context in terms)
    return compose_by(instantiated, eq or operator.eq, kind=kind, trace=trace)
