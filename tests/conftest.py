"""Shared fixtures for the orderedtree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import OrderedTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large degenerate trees, excluded by run_tests.py")


@pytest.fixture
def sample_tree():
    """The five element tree used throughout the docs.

    Structure:
            5
           / \\
          3   8
         / \\
        1   4
    """
    return OrderedTree([5, 3, 8, 1, 4])


@pytest.fixture
def wide_tree():
    """A tree exercising every removal case.

    Structure:
                 50
              /      \\
            30        70
           /  \\     /    \\
         20    40  60      80
                          /  \\
                        75    90
                       /
                     72
                       \\
                        74
    """
    return OrderedTree([50, 30, 70, 20, 40, 60, 80, 75, 90, 72, 74])
