"""
Inspection tooling for observing tree structure from outside the container.
"""

from llrb.tooling.inspection import black_height, height, in_order, render, validate

__all__ = ["black_height", "height", "in_order", "render", "validate"]
