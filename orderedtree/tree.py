"""OrderedTree: a mutable ordered multiset backed by a binary search tree.

The tree is deliberately unbalanced. Insertion order decides its shape, and
an already sorted input degrades it into a chain with linear-time
operations. Traversals are iterative, so such chains still walk safely.

Equal elements are kept, not merged: a value that compares equal to a node
is always placed in that node's right subtree.
"""

import logging
from typing import Any, Generic, Iterable, Iterator, MutableSequence, Optional, TypeVar, Union

from .config import TraversalOrder
from .core.comparator import NATURAL, Comparator, as_comparator
from .core.node import TreeNode
from .core.traverser import (
    InorderTraverser,
    LevelorderTraverser,
    PostorderTraverser,
    PreorderTraverser,
    create_traverser,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

_INORDER = InorderTraverser()
_PREORDER = PreorderTraverser()
_POSTORDER = PostorderTraverser()
_LEVELORDER = LevelorderTraverser()


class OrderedTree(Generic[T]):
    """Ordered collection of elements kept in a binary search tree.

    Example:
        >>> tree = OrderedTree([5, 3, 8, 1, 4])
        >>> list(tree)
        [1, 3, 4, 5, 8]
        >>> list(tree.preorder())
        [5, 3, 1, 4, 8]
        >>> tree.remove(5)
        True

    Not thread-safe: callers sharing a tree between threads must guard every
    access, traversals included, with their own lock.
    """

    def __init__(self,
                 iterable: Optional[Iterable[T]] = None,
                 comparator: Any = NATURAL) -> None:
        """Create a tree, optionally filled from iterable.

        Args:
            iterable: Initial elements, added one by one in iteration order
            comparator: Comparator, object with ``compare(a, b)``, or a
                callable returning negative/zero/positive. Defaults to the
                elements' natural ordering.

        Raises:
            MissingComparatorError: If comparator is None or unusable
        """
        self._comparator: Comparator = as_comparator(comparator)
        self._root: Optional[TreeNode] = None
        self._count = 0
        logger.debug("Created %s with %r", self.__class__.__name__, self._comparator)

        if iterable is not None:
            self.add_range(iterable)

    @classmethod
    def from_comparator(cls, comparator: Any,
                        iterable: Iterable[T] = ()) -> 'OrderedTree[T]':
        """Create a tree ordered by comparator and filled from iterable."""
        return cls(iterable, comparator=comparator)

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    @property
    def count(self) -> int:
        """Number of elements in the tree."""
        return self._count

    @property
    def is_read_only(self) -> bool:
        return False

    def add(self, item: T) -> None:
        """Insert item. Duplicates are kept and routed right of their equals."""
        node = TreeNode(item)

        if self._root is None:
            self._root = node
        else:
            compare = self._comparator.compare
            current = self._root
            while True:
                if compare(item, current.value) < 0:
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right

        self._count += 1

    def add_range(self, iterable: Iterable[T]) -> None:
        for item in iterable:
            self.add(item)

    def remove(self, item: T) -> bool:
        """Remove one element equal to item.

        Args:
            item: Value to remove

        Returns:
            True if an element was removed, False if none compared equal
        """
        compare = self._comparator.compare
        parent: Optional[TreeNode] = None
        current = self._root

        while current is not None:
            result = compare(item, current.value)
            if result == 0:
                break
            parent = current
            current = current.left if result < 0 else current.right

        if current is None:
            return False

        right = current.right
        if right is None:
            logger.debug("Removing %r: splicing in left child", current.value)
            replacement = current.left
        elif right.left is None:
            logger.debug("Removing %r: promoting right child", current.value)
            right.left = current.left
            replacement = right
        else:
            logger.debug("Removing %r: promoting in-order successor", current.value)
            successor_parent = right
            successor = right.left
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            successor_parent.left = successor.right
            successor.left = current.left
            successor.right = current.right
            replacement = successor

        self._replace_child(parent, current, replacement)
        self._count -= 1
        return True

    def discard(self, item: T) -> None:
        self.remove(item)

    def _replace_child(self, parent: Optional[TreeNode], child: TreeNode,
                       replacement: Optional[TreeNode]) -> None:
        """Put replacement where child hangs below parent.

        The side is chosen by comparing child's value with parent's again,
        the same test ``add`` uses, not by the direction of the search.
        """
        if parent is None:
            self._root = replacement
        elif self._comparator.compare(child.value, parent.value) < 0:
            parent.left = replacement
        else:
            parent.right = replacement

    def contains(self, item: T) -> bool:
        compare = self._comparator.compare
        current = self._root
        while current is not None:
            result = compare(item, current.value)
            if result == 0:
                return True
            current = current.left if result < 0 else current.right
        return False

    def clear(self) -> None:
        logger.debug("Clearing %d elements", self._count)
        self._root = None
        self._count = 0

    def copy_to(self, array: MutableSequence[T], array_index: int = 0) -> None:
        """Write the elements in ascending order into array.

        Args:
            array: Destination; must already have room from array_index on
            array_index: Position of the first element written

        Raises:
            IndexError: From the destination, when it is too short
        """
        for value in self:
            array[array_index] = value
            array_index += 1

    def copy(self) -> 'OrderedTree[T]':
        """Return a new tree with the same comparator and the same shape."""
        return self.__class__(self.preorder(), comparator=self._comparator)

    def inorder(self) -> Iterator[T]:
        return _INORDER.traverse(self._root)

    def preorder(self) -> Iterator[T]:
        return _PREORDER.traverse(self._root)

    def postorder(self) -> Iterator[T]:
        return _POSTORDER.traverse(self._root)

    def levelorder(self) -> Iterator[T]:
        return _LEVELORDER.traverse(self._root)

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> Iterator[T]:
        """Walk the tree in the given order.

        Args:
            order: TraversalOrder member or name (inorder, pre, post, level, ...)

        Raises:
            UnknownTraversalError: If the order name is not recognized
        """
        return create_traverser(order).traverse(self._root)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.inorder())!r})"
