"""Traversal selection for orderedtree.

The tree itself has nothing to configure beyond its comparator. What callers
do choose is the order in which values are walked, either by enum member or
by a short name.
"""

from enum import Enum
from typing import Union

from .errors import UnknownTraversalError


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of the tree."""
    INORDER = "inorder"         # Left, value, right (ascending)
    PREORDER = "preorder"       # Value, left, right
    POSTORDER = "postorder"     # Left, right, value
    LEVELORDER = "levelorder"   # Breadth-first, top to bottom


_ALIASES = {
    'inorder': TraversalOrder.INORDER,
    'in_order': TraversalOrder.INORDER,
    'in': TraversalOrder.INORDER,
    'sorted': TraversalOrder.INORDER,
    'preorder': TraversalOrder.PREORDER,
    'pre_order': TraversalOrder.PREORDER,
    'pre': TraversalOrder.PREORDER,
    'postorder': TraversalOrder.POSTORDER,
    'post_order': TraversalOrder.POSTORDER,
    'post': TraversalOrder.POSTORDER,
    'levelorder': TraversalOrder.LEVELORDER,
    'level_order': TraversalOrder.LEVELORDER,
    'level': TraversalOrder.LEVELORDER,
    'bfs': TraversalOrder.LEVELORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Normalize a traversal order given as an enum member or a name.

    Args:
        order: ``TraversalOrder`` member or one of its names/aliases
            (case-insensitive, e.g. ``"pre"``, ``"level_order"``, ``"bfs"``)

    Returns:
        The matching TraversalOrder

    Raises:
        UnknownTraversalError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    if isinstance(order, str):
        found = _ALIASES.get(order.strip().lower().replace('-', '_'))
        if found is not None:
            return found

    raise UnknownTraversalError(
        f"Unknown traversal order: {order!r}. "
        f"Choose from: {', '.join(_ALIASES.keys())}"
    )
