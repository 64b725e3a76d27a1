#!/usr/bin/env python3
"""
RATDEDUCT Feature Demonstration

This script demonstrates the major features of the ratdeduct library.
"""

from ratdeduct import (
    RatioPair, E,
    compose, compose_by, pair_compose, has_cancellation,
    try_from_tree, to_tree, has_ratio_shape, RatioShapeError,
    substitute, eval_composition,
)


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def demo_composition():
    """Demonstrate ratio composition."""
    section("Composition")

    examples = [
        (RatioPair(["a"], ["b"]), RatioPair(["b"], ["c"])),
        (RatioPair([], ["x", "x"]), RatioPair(["x"], [])),
        (RatioPair([], ["x"]), RatioPair(["y"], [])),
    ]

    for left, right in examples:
        print(f"  {left} * {right}")
        print(f"    => {pair_compose(left, right)}")

    print(f"\n  compose([]) => {compose([])}")


def demo_equivalence():
    """Demonstrate custom term equivalence."""
    section("Custom Equivalence")

    same_name = lambda a, b: a.lower() == b.lower()
    ratios = [RatioPair(["Start"], ["Middle"]), RatioPair(["middle"], ["End"])]

    print(f"  with ==:        {compose(ratios)}")
    print(f"  ignoring case:  {compose_by(ratios, same_name)}")
    print(f"  has_cancellation: {has_cancellation(*ratios)}")


def demo_trees():
    """Demonstrate tree conversion."""
    section("Trees")

    tree = E.ratio([E.group("mortal", "X")], [E.group("man", "X")])
    print(f"  tree: {tree}")
    print(f"  has_ratio_shape: {has_ratio_shape(tree)}")

    ratio = try_from_tree(tree)
    print(f"  ratio: {ratio}")
    print(f"  back:  {to_tree(ratio)}")

    for bad in ["x", [["a"]], ["a", ["b"]], [["a"], "b"], ["a", "b"]]:
        try:
            try_from_tree(bad)
        except RatioShapeError as e:
            print(f"  {bad!r:20} => {type(e).__name__}")


def demo_deduction():
    """Demonstrate a full deduction step."""
    section("Deduction")

    rule = try_from_tree([[["mortal", "X"]], [["man", "X"]]])
    fact = try_from_tree([[["man", "socrates"]], []])

    print(f"  rule: {rule}")
    print(f"  fact: {fact}")
    print(f"  rule[X=socrates]: {substitute(rule, {'X': 'socrates'})}")

    result, trace = eval_composition([(rule, {"X": "socrates"}), (fact, {})], trace=True)
    print(f"\n  result: {to_tree(result)}")
    print(f"  trace:  {trace.format('compact')}")
    print(f"  {trace.summary()}")


def main():
    """Run all demonstrations."""
    print("\n" + "="*60)
    print(" RATDEDUCT - Rational Deduction Algorithms")
    print("="*60)

    demo_composition()
    demo_equivalence()
    demo_trees()
    demo_deduction()

    print("\n" + "="*60)
    print(" Demo complete!")
    print("="*60 + "\n")


if __name__ == "__main__":
    main()
