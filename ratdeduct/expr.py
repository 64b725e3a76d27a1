"""
Expression trees consumed by the ratio layer.

Expressions are nested lists, as in the rewriting engine:

    "x"                  - atom
    42                   - atom
    ["f", "x", ["g", 1]] - group of three children

Any value that is not a list is an atom. A group is an ordered list of
child expressions; no child position is privileged.

A ratio encoded as a tree is a group of two groups:

    [["a", "b"], ["c"]]  - top [a, b], bot [c]
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Tuple, Union

# Type aliases
AtomType = Any
ExprType = Union[AtomType, List]
SubstitutionFunc = Callable[[AtomType], ExprType]


def is_group(expr: ExprType) -> bool:
    """Check if an expression is a group."""
    return isinstance(expr, list)


def is_atom(expr: ExprType) -> bool:
    """Check if an expression is an atom (anything but a group)."""
    return not is_group(expr)


def from_atom(atom: AtomType) -> ExprType:
    """
    Build an expression from an atom.

    Raises:
        TypeError: If atom is a list (lists are groups)
    """
    if is_group(atom):
        raise TypeError("from_atom: a list is a group, not an atom")
    return atom


def from_group(children: Iterable[ExprType]) -> List:
    """Build a group expression from child expressions."""
    return list(children)


def children(expr: ExprType) -> Iterator[ExprType]:
    """
    Iterate the children of a group.

    Raises:
        TypeError: If expr is an atom
    """
    if not is_group(expr):
        raise TypeError("children: argument must be a group")
    return iter(expr)


def substitute(expr: ExprType, f: SubstitutionFunc) -> ExprType:
    """
    Replace every atom of an expression with f(atom).

    Atoms are visited depth first, left to right, and f is called once
    per atom occurrence. Group structure is rebuilt, never mutated.

    Examples:
        substitute(["f", "x"], lambda a: ["g", a])
            -> [["g", "f"], ["g", "x"]]
    """
    if is_group(expr):
        return from_group(substitute(child, f) for child in expr)
    return f(expr)


def substitute_iter_on_atoms(pairs: Iterable[Tuple[AtomType, ExprType]], atom: AtomType) -> ExprType:
    """
    Look up an atom in (atom, replacement) pairs.

    The first pair whose atom is ``==`` wins. Unbound atoms map to
    themselves.
    """
    for candidate, replacement in pairs:
        if candidate == atom:
            return replacement
    return from_atom(atom)


# ============================================================
# Substitution - lookup table usable as a substitution function
# ============================================================

class Substitution:
    """
    Dict-like table mapping atoms to replacement expressions.

    A Substitution is callable, so it can be passed wherever a
    substitution function is expected. Atoms it does not bind are
    returned unchanged:

        s = Substitution({"X": "socrates"})
        s("X")        # => "socrates"
        s("mortal")   # => "mortal"
        substitute(["is", "X"], s)  # => ["is", "socrates"]

    ``calls`` counts lookups, for callers that want to check how often a
    context was consulted.
    """

    __slots__ = ('_dict', 'calls')

    def __init__(self, bindings: Union[Mapping, Iterable[Tuple[AtomType, ExprType]], None] = None):
        """Initialize from a mapping or from (atom, replacement) pairs."""
        if bindings is None:
            bindings = {}
        self._dict: Dict[AtomType, ExprType] = dict(bindings)
        self.calls = 0

    def __call__(self, atom: AtomType) -> ExprType:
        self.calls += 1
        if atom in self._dict:
            return self._dict[atom]
        return from_atom(atom)

    def __getitem__(self, atom: AtomType) -> ExprType:
        return self._dict[atom]

    def __setitem__(self, atom: AtomType, replacement: ExprType):
        self._dict[atom] = replacement

    def get(self, atom: AtomType, default=None):
        return self._dict.get(atom, default)

    def __contains__(self, atom: AtomType) -> bool:
        return atom in self._dict

    def __iter__(self):
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def items(self):
        return self._dict.items()

    def __repr__(self) -> str:
        return f"Substitution({self._dict})"

    def __eq__(self, other):
        if isinstance(other, Substitution):
            return self._dict == other._dict
        return False

    __hash__ = None

    def to_dict(self) -> Dict[AtomType, ExprType]:
        """Convert to a plain dictionary."""
        return self._dict.copy()


# ============================================================
# Expression Builder
# ============================================================

class _ExprBuilder:
    """
    Expression builder for ratio trees.

    Examples:
        from ratdeduct import E

        E.atom("x")                     -> "x"
        E.group("f", "x", E.group("y")) -> ["f", "x", ["y"]]
        E.ratio(["a", "b"], ["c"])      -> [["a", "b"], ["c"]]
    """

    def atom(self, value: AtomType) -> ExprType:
        return from_atom(value)

    def group(self, *items: ExprType) -> List:
        return from_group(items)

    def ratio(self, top: Iterable[ExprType], bot: Iterable[ExprType]) -> List:
        """Build the tree encoding of a ratio: a group of two groups."""
        return from_group([from_group(top), from_group(bot)])

    def __repr__(self) -> str:
        return "E (expression builder)"


# Singleton instance
E = _ExprBuilder()
