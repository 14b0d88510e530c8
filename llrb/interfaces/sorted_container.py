"""
SortedContainer abstract base class for insert-only ordered containers.
"""

from abc import ABC, abstractmethod


class SortedContainer(ABC):
    """
    Abstract base class for insert-only ordered containers.

    Values are unique; inserting a value that is already present is a
    no-op reported through the return value, not an error.

    Implementations:
    - RedBlackTree: left-leaning, rebalanced bottom-up after each insert
    """

    @abstractmethod
    def add(self, value: int) -> bool:
        """
        Insert a value if it is not already present.

        Args:
            value: The value to insert. Must be ordered against stored values.

        Returns:
            True if the value was inserted, False if it was already present.

        Time complexity: O(log N)
        """
        pass
