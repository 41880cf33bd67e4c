"""Comparison strategies for orderedtree.

The tree never compares elements with ``<`` directly. It asks a comparator,
which returns a negative number, zero or a positive number when the first
argument orders before, equal to or after the second. Any of the following
can be handed to a tree:

- a ``Comparator`` instance
- an object with a ``compare(a, b)`` method
- a plain ``Callable[[T, T], int]`` such as ``lambda a, b: a - b``

``as_comparator`` turns all of them into a ``Comparator``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..errors import MissingComparatorError


class Comparator(ABC):
    """Abstract base class for ordering strategies.

    Implementations must impose a total order and answer consistently for
    the lifetime of the tree that uses them, otherwise the search tree
    invariant cannot hold.
    """

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Compare two elements.

        Args:
            a: Left operand
            b: Right operand

        Returns:
            Negative if a orders before b, zero if equal, positive if after
        """
        pass

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NaturalComparator(Comparator):
    """Orders elements by their own ``<`` and ``>`` operators."""

    def compare(self, a: Any, b: Any) -> int:
        return (a > b) - (a < b)


class ReverseComparator(Comparator):
    """Inverts another comparator."""

    def __init__(self, inner: Any = None) -> None:
        self.inner = as_comparator(inner) if inner is not None else NATURAL

    def compare(self, a: Any, b: Any) -> int:
        return self.inner.compare(b, a)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.inner!r})"


class FunctionComparator(Comparator):
    """Adapts a plain two-argument function or a foreign ``compare`` method."""

    def __init__(self, func: Callable[[Any, Any], int]) -> None:
        self.func = func

    def compare(self, a: Any, b: Any) -> int:
        return self.func(a, b)

    def __repr__(self) -> str:
        name = getattr(self.func, '__qualname__', None) or repr(self.func)
        return f"{self.__class__.__name__}({name})"


class KeyComparator(Comparator):
    """Natural ordering of a projected sort key, like ``sorted(key=...)``."""

    def __init__(self, key: Callable[[Any], Any]) -> None:
        self.key = key

    def compare(self, a: Any, b: Any) -> int:
        ka, kb = self.key(a), self.key(b)
        return (ka > kb) - (ka < kb)


NATURAL = NaturalComparator()


def as_comparator(obj: Any) -> Comparator:
    """Resolve a comparator-like object into a Comparator.

    Args:
        obj: Comparator, object exposing ``compare(a, b)``, or a callable

    Returns:
        A Comparator wrapping obj

    Raises:
        MissingComparatorError: If obj is None or cannot compare anything
    """
    if obj is None:
        raise MissingComparatorError("comparator is required, got None")
    if isinstance(obj, Comparator):
        return obj

    compare = getattr(obj, 'compare', None)
    if callable(compare):
        return FunctionComparator(compare)
    if callable(obj):
        return FunctionComparator(obj)

    raise MissingComparatorError(
        f"{type(obj).__name__!r} object is not a comparator; "
        f"pass a callable (a, b) -> int or an object with a compare method"
    )
