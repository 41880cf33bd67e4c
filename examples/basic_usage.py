#!/usr/bin/env python3
"""
Basic orderedtree usage.

This example demonstrates:
- The four traversal orders on a small tree
- Custom comparators and duplicate handling
- How insertion order shapes an unbalanced tree
"""

import sys
import time
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import OrderedTree, KeyComparator, TraversalOrder


def show_orders() -> None:
    tree = OrderedTree([5, 3, 8, 1, 4])
    print("Tree built from [5, 3, 8, 1, 4]")
    for order in TraversalOrder:
        print(f"  {order.value:<11} {list(tree.traverse(order))}")

    tree.remove(5)
    print(f"After remove(5): preorder {list(tree.preorder())}")


def show_comparators() -> None:
    words = OrderedTree(["pear", "Apple", "fig", "apple"], comparator=KeyComparator(str.lower))
    print(f"\nCase-insensitive words: {list(words)}")
    print(f"  contains 'APPLE': {words.contains('APPLE')}")
    words.remove("APPLE")
    print(f"  after one remove:  {list(words)}")


def show_shapes(n: int = 2000) -> None:
    print(f"\nInserting {n} values")
    for label, values in (("shuffled", [(i * 7919) % n for i in range(n)]),
                          ("sorted", list(range(n)))):
        start = time.perf_counter()
        tree = OrderedTree(values)
        elapsed = time.perf_counter() - start
        print(f"  {label:<9} build {elapsed * 1000:8.1f} ms, "
              f"last levelorder value {list(tree.levelorder())[-1]}")


if __name__ == "__main__":
    show_orders()
    show_comparators()
    show_shapes()
