"""Property-based tests for the ratio monoid."""

from collections import Counter

from hypothesis import given, settings, strategies as st

from ratdeduct import (
    RatioPair,
    compose,
    pair_compose,
    reverse,
    substitute,
    to_tree,
    try_from_tree,
    multiset_symmetric_difference,
)

atoms = st.sampled_from(["a", "b", "c", "x", "y"])
terms = st.recursive(atoms, lambda inner: st.lists(inner, max_size=3), max_leaves=6)
sides = st.lists(atoms, max_size=5)
ratios = st.builds(RatioPair, sides, sides)
tree_ratios = st.builds(RatioPair, st.lists(terms, max_size=4), st.lists(terms, max_size=4))


class TestMonoidProperties:
    """Algebraic properties of composition."""

    @given(ratios)
    def test_identity(self, r):
        """The empty ratio is a two-sided identity."""
        identity = compose([])
        assert pair_compose(identity, r) == r
        assert pair_compose(r, identity) == r

    @given(ratios, ratios, ratios)
    def test_left_fold(self, r1, r2, r3):
        """compose folds pair_compose from the left."""
        assert compose([r1, r2, r3]) == pair_compose(pair_compose(r1, r2), r3)

    @given(ratios)
    def test_reverse_involution(self, r):
        """Reversing twice gives back the ratio."""
        assert reverse(reverse(r)) == r

    @given(ratios, ratios)
    def test_term_count_conservation(self, r1, r2):
        """Each cancellation removes one term from each side."""
        result = pair_compose(r1, r2)
        before = len(r1.top) + len(r1.bot) + len(r2.top) + len(r2.bot)
        after = len(result.top) + len(result.bot)
        assert (before - after) % 2 == 0
        assert len(result.top) - len(result.bot) == (
            len(r1.top) + len(r2.top) - len(r1.bot) - len(r2.bot))

    @given(ratios, ratios)
    def test_composition_as_multisets(self, r1, r2):
        """As multisets, top minus bot is additive."""
        result = pair_compose(r1, r2)
        net = Counter(result.top)
        net.subtract(result.bot)
        expected = Counter(r1.top + r2.top)
        expected.subtract(r1.bot + r2.bot)
        assert {k: v for k, v in net.items() if v} == {k: v for k, v in expected.items() if v}


class TestMultisetProperties:
    """Properties of the symmetric difference primitive."""

    @given(sides, sides)
    def test_residues_disjoint(self, left, right):
        """No item survives on both sides."""
        left_only, right_only = multiset_symmetric_difference(left, right)
        assert not set(left_only) & set(right_only)

    @given(sides, sides)
    def test_matches_counter_difference(self, left, right):
        """The residues are the Counter differences."""
        left_only, right_only = multiset_symmetric_difference(left, right)
        assert Counter(left_only) == Counter(left) - Counter(right)
        assert Counter(right_only) == Counter(right) - Counter(left)


class TestTreeProperties:
    """Properties of tree conversion and substitution."""

    @given(tree_ratios)
    def test_round_trip(self, r):
        """try_from_tree inverts to_tree."""
        assert try_from_tree(to_tree(r)) == r

    @given(tree_ratios, st.dictionaries(atoms, terms))
    @settings(max_examples=50)
    def test_substitution_preserves_shape(self, r, bindings):
        """Substitution never changes the number of terms."""
        result = substitute(r, bindings)
        assert len(result.top) == len(r.top)
        assert len(result.bot) == len(r.bot)
