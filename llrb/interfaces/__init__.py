"""
Abstract base classes for the ordered containers.
"""

from llrb.interfaces.sorted_container import SortedContainer

__all__ = ["SortedContainer"]
