"""Tree traversal strategies for orderedtree.

Traversers walk a binary tree of ``TreeNode`` and yield the stored values.
None of them recurse: each keeps its own stack or queue, so a degenerate
tree (a sorted insertion order builds a linked list) can be walked no matter
how far it exceeds the interpreter's recursion limit.

Every ``traverse`` call is a generator. Nothing is read until the first
value is pulled, and the walk sees whatever links exist at that moment.
Changing the tree while a walk is in progress is not supported.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Union

from ..config import TraversalOrder, parse_order
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies."""

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Any]:
        """Walk the tree below root.

        Args:
            root: Root node, or None for an empty tree

        Yields:
            Node values in this traverser's order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class InorderTraverser(TreeTraverser):
    """Left subtree, value, right subtree.

    Yields values in ascending comparator order.
    """

    order = TraversalOrder.INORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Any]:
        stack: List[TreeNode] = []
        node = root

        while stack or node is not None:
            if node is None:
                node = stack.pop()
                yield node.value
                node = node.right
            else:
                stack.append(node)
                node = node.left


class PreorderTraverser(TreeTraverser):
    """Value, left subtree, right subtree.

    Re-adding values in this order to an empty tree with the same
    comparator rebuilds the exact same shape.
    """

    order = TraversalOrder.PREORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Any]:
        if root is None:
            return

        stack: List[TreeNode] = [root]
        while stack:
            node = stack.pop()
            yield node.value
            # Right goes on first so the left child is popped first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


class PostorderTraverser(TreeTraverser):
    """Left subtree, right subtree, value.

    A node is yielded only after its whole right subtree. Descending left,
    each node is pushed on top of its own right child. When a node is popped
    and its right child is still directly below it, that subtree has not been
    visited yet: the child is taken off, the node goes back on the stack and
    the walk continues into the right subtree before revisiting the node.
    """

    order = TraversalOrder.POSTORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Any]:
        stack: List[TreeNode] = []
        node = root

        while stack or node is not None:
            if node is None:
                node = stack.pop()
                if stack and node.right is stack[-1]:
                    stack.pop()
                    stack.append(node)
                    node = node.right
                else:
                    yield node.value
                    node = None
            else:
                if node.right is not None:
                    stack.append(node.right)
                stack.append(node)
                node = node.left


class LevelorderTraverser(TreeTraverser):
    """Breadth-first, top to bottom and left to right within a level."""

    order = TraversalOrder.LEVELORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Any]:
        if root is None:
            return

        queue: Deque[TreeNode] = deque([root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)


_TRAVERSERS = {
    TraversalOrder.INORDER: InorderTraverser,
    TraversalOrder.PREORDER: PreorderTraverser,
    TraversalOrder.POSTORDER: PostorderTraverser,
    TraversalOrder.LEVELORDER: LevelorderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or name (inorder, pre, post, level, ...)

    Returns:
        TreeTraverser instance

    Raises:
        UnknownTraversalError: If the order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
