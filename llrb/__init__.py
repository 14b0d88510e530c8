"""
Insert-only left-leaning Red-Black Tree.

This package provides an ordered container with a single operation:
- add(value) - O(log N) insert, returns False for a value already present

Structure can be observed from outside through llrb.tooling.inspection.
"""

from llrb.models.sortedcontainers import RedBlackTree

__all__ = ["RedBlackTree"]
