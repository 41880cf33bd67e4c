"""High-level API for orderedtree.

Small functional wrappers around ``OrderedTree`` for the common one-liners:
build a tree, walk it in some order, or sort with a custom comparator.
"""

from typing import Any, Iterable, Iterator, List, Union

from .config import TraversalOrder
from .core.comparator import NATURAL, ReverseComparator, as_comparator
from .tree import OrderedTree


def build_tree(values: Iterable[Any], comparator: Any = NATURAL) -> OrderedTree:
    """Build a tree by adding values in iteration order.

    Args:
        values: Elements to insert
        comparator: Ordering strategy (see ``as_comparator``)

    Returns:
        New OrderedTree holding every element of values

    Example:
        >>> list(build_tree([5, 3, 8]).preorder())
        [5, 3, 8]
    """
    return OrderedTree(values, comparator=comparator)


def traverse(tree: OrderedTree,
             order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> Iterator[Any]:
    """Walk tree in the given order.

    Args:
        tree: Tree to walk
        order: TraversalOrder member or name (inorder, pre, post, level, ...)

    Yields:
        Values in the requested order

    Raises:
        UnknownTraversalError: If the order name is not recognized
    """
    yield from tree.traverse(order)


def tree_sort(values: Iterable[Any],
              comparator: Any = NATURAL,
              reverse: bool = False) -> List[Any]:
    """Sort values by inserting them into a tree and reading it in order.

    Equal elements keep their input order, since each one lands to the
    right of those already in the tree.

    Args:
        values: Elements to sort
        comparator: Ordering strategy (see ``as_comparator``)
        reverse: Sort descending

    Returns:
        New sorted list
    """
    resolved = as_comparator(comparator)
    if reverse:
        resolved = ReverseComparator(resolved)
    return list(OrderedTree(values, comparator=resolved))
