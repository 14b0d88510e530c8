"""
Sorted container implementations.
"""

from llrb.models.sortedcontainers.red_black_tree import Color, Node, RedBlackTree

__all__ = ["Color", "Node", "RedBlackTree"]
