"""Core building blocks for orderedtree.

Nodes, comparison strategies and traversers. ``OrderedTree`` composes these;
they are exported for callers that want to plug in their own ordering or
walk a tree in an order chosen at runtime.
"""

from .node import TreeNode
from .comparator import (
    Comparator,
    NaturalComparator,
    ReverseComparator,
    FunctionComparator,
    KeyComparator,
    NATURAL,
    as_comparator,
)
from .traverser import (
    TreeTraverser,
    InorderTraverser,
    PreorderTraverser,
    PostorderTraverser,
    LevelorderTraverser,
    create_traverser,
)

__all__ = [
    "TreeNode",
    "Comparator",
    "NaturalComparator",
    "ReverseComparator",
    "FunctionComparator",
    "KeyComparator",
    "NATURAL",
    "as_comparator",
    "TreeTraverser",
    "InorderTraverser",
    "PreorderTraverser",
    "PostorderTraverser",
    "LevelorderTraverser",
    "create_traverser",
]
