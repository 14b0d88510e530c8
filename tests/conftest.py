"""
Shared pytest fixtures for Red-Black Tree tests.
"""

import random

import pytest

from llrb.models.sortedcontainers import Color, Node, RedBlackTree


@pytest.fixture
def tree():
    """Provide a fresh, empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def rng():
    """Provide a seeded random generator so sweeps are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scenario_values():
    """Provide the small mixed insertion order used across tests."""
    return [10, 5, 15, 3, 7]


@pytest.fixture
def populated_tree(scenario_values):
    """Provide a tree built from scenario_values."""
    tree = RedBlackTree()
    for value in scenario_values:
        tree.add(value)
    return tree


@pytest.fixture
def make_node():
    """Provide a factory for hand-built nodes."""

    def _make(value: int, color: Color = Color.BLACK, left=None, right=None) -> Node:
        return Node(value=value, color=color, left=left, right=right)

    return _make
