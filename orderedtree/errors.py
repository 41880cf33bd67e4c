"""Exceptions raised by orderedtree.

Looking up a value that is not in the tree is never an error: ``remove``
reports it with ``False``. The classes here cover misuse at the API seams.
"""


class OrderedTreeError(Exception):
    """Base class for all orderedtree errors."""
    pass


class MissingComparatorError(OrderedTreeError, TypeError):
    """Raised when a tree is constructed without a usable comparator."""
    pass


class UnknownTraversalError(OrderedTreeError, ValueError):
    """Raised when a traversal order name is not recognized."""
    pass
