"""Tests for multiset symmetric difference and intersection."""

import operator
import pytest
from ratdeduct import (
    multiset_partition_by,
    multiset_symmetric_difference,
    multiset_symmetric_difference_by,
    has_intersection,
    has_intersection_by,
)


class TestSymmetricDifference:
    """Tests for multiset_symmetric_difference."""

    def test_disjoint(self):
        """Disjoint multisets are returned unchanged."""
        assert multiset_symmetric_difference(["a", "b"], ["c"]) == (["a", "b"], ["c"])

    def test_common_item_cancels(self):
        """A shared item is removed from both sides."""
        assert multiset_symmetric_difference(["a", "b"], ["b", "c"]) == (["a"], ["c"])

    def test_one_occurrence_cancels_one(self):
        """Duplicates cancel one-for-one, not all at once."""
        assert multiset_symmetric_difference(["x", "x"], ["x"]) == (["x"], [])
        assert multiset_symmetric_difference(["x"], ["x", "x"]) == ([], ["x"])

    def test_duplicates_on_both_sides(self):
        """Matching duplicates cancel completely."""
        assert multiset_symmetric_difference(["x", "x", "y"], ["x", "x"]) == (["y"], [])

    def test_empty_left(self):
        """Empty left leaves right unchanged."""
        assert multiset_symmetric_difference([], ["a", "b"]) == ([], ["a", "b"])

    def test_empty_right(self):
        """Empty right leaves left unchanged."""
        assert multiset_symmetric_difference(["a", "b"], []) == (["a", "b"], [])

    def test_both_empty(self):
        """Two empty multisets give two empty residues."""
        assert multiset_symmetric_difference([], []) == ([], [])

    def test_order_preserved(self):
        """Residues keep the order of their input."""
        left, right = multiset_symmetric_difference(["d", "b", "a"], ["c", "b", "e"])
        assert left == ["d", "a"]
        assert right == ["c", "e"]

    def test_nested_terms(self):
        """Terms can be nested expressions."""
        left, right = multiset_symmetric_difference([["f", "x"], "y"], [["f", "x"]])
        assert left == ["y"]
        assert right == []

    def test_accepts_iterables(self):
        """Inputs may be any iterable."""
        left, right = multiset_symmetric_difference(iter(["a", "b"]), ("b",))
        assert left == ["a"]
        assert right == []


class TestCustomEquivalence:
    """Tests for the _by variants with a caller-supplied predicate."""

    def test_case_insensitive(self):
        """Items cancel under a custom equivalence."""
        eq = lambda a, b: a.lower() == b.lower()
        assert multiset_symmetric_difference_by(["A", "b"], ["a", "C"], eq) == (["b"], ["C"])

    def test_predicate_argument_order(self):
        """The predicate is called as eq(left_item, right_item)."""
        calls = []

        def eq(left, right):
            calls.append((left, right))
            return False

        multiset_symmetric_difference_by(["l"], ["r"], eq)
        assert calls == [("l", "r")]

    def test_first_unconsumed_match_wins(self):
        """A left item consumes the first unconsumed equivalent right item."""
        eq = lambda a, b: a[0] == b[0]
        left, right = multiset_symmetric_difference_by(["a1", "a2"], ["a3", "a4", "a5"], eq)
        assert left == []
        assert right == ["a5"]


class TestPartition:
    """Tests for multiset_partition_by."""

    def test_reports_cancelled(self):
        """Cancelled left items are reported in left order."""
        left, cancelled, right = multiset_partition_by(
            ["a", "b", "c", "b"], ["b", "c"], operator.eq)
        assert left == ["a", "b"]
        assert cancelled == ["b", "c"]
        assert right == []

    def test_nothing_cancelled(self):
        """No matches leaves cancelled empty."""
        assert multiset_partition_by(["a"], ["b"], operator.eq) == (["a"], [], ["b"])


class TestIntersection:
    """Tests for has_intersection."""

    def test_shared_item(self):
        """A shared item is an intersection."""
        assert has_intersection(["a", "b"], ["c", "b"])

    def test_no_shared_item(self):
        """Disjoint multisets have no intersection."""
        assert not has_intersection(["a", "b"], ["c", "d"])

    def test_empty(self):
        """Empty multisets never intersect."""
        assert not has_intersection([], ["a"])
        assert not has_intersection(["a"], [])

    def test_custom_equivalence(self):
        """has_intersection_by uses the predicate."""
        eq = lambda a, b: a % 10 == b % 10
        assert has_intersection_by([13], [3], eq)
        assert not has_intersection_by([13], [4], eq)
