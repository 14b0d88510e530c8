"""
Data models for the ordered containers.
"""

from llrb.models.exceptions import InvariantViolationError
from llrb.models.sortedcontainers import Color, Node, RedBlackTree

__all__ = [
    "Color",
    "InvariantViolationError",
    "Node",
    "RedBlackTree",
]
