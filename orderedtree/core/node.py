"""TreeNode for orderedtree.

A node is a plain data container. Each child link is owned by exactly one
parent and there are no parent pointers, so the nodes always form a strict
tree and dropping the root releases everything below it.
"""

from typing import Any, Optional


class TreeNode:
    """A single value in the tree together with its two child links."""

    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
