"""Property-based tests for OrderedTree using hypothesis.

Random insertion and removal sequences are checked against a plain sorted
list model.
"""

import sys
from collections import Counter
from pathlib import Path

from hypothesis import given, settings, strategies as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import OrderedTree, ReverseComparator


small_ints = st.integers(min_value=-50, max_value=50)
int_lists = st.lists(small_ints, max_size=60)


def _all_orders(tree):
    return [
        list(tree.inorder()),
        list(tree.preorder()),
        list(tree.postorder()),
        list(tree.levelorder()),
    ]


@given(int_lists)
def test_inorder_is_sorted_input(xs):
    assert list(OrderedTree(xs).inorder()) == sorted(xs)


@given(int_lists)
def test_reverse_comparator_sorts_descending(xs):
    assert list(OrderedTree(xs, comparator=ReverseComparator())) == sorted(xs, reverse=True)


@given(int_lists)
def test_count_matches_inorder_length(xs):
    tree = OrderedTree(xs)
    assert tree.count == len(xs) == len(list(tree.inorder()))


@given(int_lists)
def test_all_orders_are_permutations(xs):
    counts = [Counter(walk) for walk in _all_orders(OrderedTree(xs))]
    assert all(c == Counter(xs) for c in counts)


@given(int_lists)
def test_preorder_rebuilds_same_shape(xs):
    tree = OrderedTree(xs)
    assert _all_orders(OrderedTree(tree.preorder())) == _all_orders(tree)


@given(int_lists, small_ints)
def test_removing_missing_value_changes_nothing(xs, missing):
    tree = OrderedTree(v for v in xs if v != missing)
    before = _all_orders(tree)
    assert tree.remove(missing) is False
    assert _all_orders(tree) == before
    for v in xs:
        if v != missing:
            assert tree.contains(v)


@given(int_lists, small_ints)
def test_add_then_remove(xs, e):
    tree = OrderedTree(xs)
    tree.add(e)
    assert tree.remove(e) is True
    # A duplicate survives one removal
    assert tree.contains(e) == (e in xs)
    assert list(tree) == sorted(xs)


@settings(max_examples=200)
@given(st.lists(st.tuples(st.booleans(), small_ints), max_size=120))
def test_matches_sorted_list_model(ops):
    tree = OrderedTree()
    model = []
    for is_add, value in ops:
        if is_add:
            tree.add(value)
            model.append(value)
        else:
            expected = value in model
            assert tree.remove(value) is expected
            if expected:
                model.remove(value)
        assert tree.count == len(model)
    assert list(tree) == sorted(model)
    for value in set(model):
        assert value in tree
    assert all(Counter(walk) == Counter(model) for walk in _all_orders(tree))
