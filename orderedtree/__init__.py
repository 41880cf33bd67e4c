"""orderedtree - an ordered multiset backed by an unbalanced binary search tree.

    from orderedtree import OrderedTree

    tree = OrderedTree([5, 3, 8, 1, 4])
    list(tree)               # [1, 3, 4, 5, 8]
    list(tree.preorder())    # [5, 3, 1, 4, 8]
    list(tree.levelorder())  # [5, 3, 8, 1, 4]
    tree.remove(5)           # True

Any comparator returning negative/zero/positive can order the tree:

    OrderedTree(words, comparator=lambda a, b: len(a) - len(b))

The structure is single-threaded. Guard it with your own lock if it is
shared between threads.
"""

import logging

__version__ = "0.1.0"

from .errors import OrderedTreeError, MissingComparatorError, UnknownTraversalError
from .config import TraversalOrder, parse_order
from .core import (
    TreeNode,
    Comparator,
    NaturalComparator,
    ReverseComparator,
    FunctionComparator,
    KeyComparator,
    NATURAL,
    as_comparator,
    TreeTraverser,
    InorderTraverser,
    PreorderTraverser,
    PostorderTraverser,
    LevelorderTraverser,
    create_traverser,
)
from .tree import OrderedTree
from .api import build_tree, traverse, tree_sort

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "OrderedTreeError",
    "MissingComparatorError",
    "UnknownTraversalError",
    # Config
    "TraversalOrder",
    "parse_order",
    # Core
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
    # Tree
    "OrderedTree",
    # API
    "build_tree",
    "traverse",
    "tree_sort",
]
