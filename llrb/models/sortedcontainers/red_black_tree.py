"""
Left-leaning Red-Black Tree for insert-only ordered storage.

Balance is restored bottom-up along the insertion path, so height stays
within 2 * log2(N + 1) after every add.
"""

from dataclasses import dataclass, field
from enum import IntEnum

from llrb.interfaces.sorted_container import SortedContainer


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass
class Node:
    """Node in the Red-Black Tree."""

    value: int
    color: Color = Color.RED
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


class RedBlackTree(SortedContainer):
    """
    Insert-only left-leaning Red-Black Tree.

    Properties maintained after every add:
    1. Red links lean left (no red right child under a black left child)
    2. No two red links in a row down the left spine
    3. Root is always black
    4. Every path from root to an empty subtree has the same number of black nodes
    """

    def __init__(self) -> None:
        self._root: Node | None = None

    def add(self, value: int) -> bool:
        """Insert value if absent. O(log N)"""
        if self._root is None:
            self._root = Node(value=value, color=Color.BLACK)
            return True

        inserted = self._add_node(self._root, value)
        self._root = self._rebalance(self._root)
        self._root.color = Color.BLACK
        return inserted

    def _add_node(self, node: Node, value: int) -> bool:
        """Descend to the insertion point, rebalancing children on the way back."""
        if value == node.value:
            return False

        if value < node.value:
            if node.left is None:
                node.left = Node(value=value)
                return True
            inserted = self._add_node(node.left, value)
            # Child reference is only valid once the subtree below has settled
            node.left = self._rebalance(node.left)
            return inserted

        if node.right is None:
            node.right = Node(value=value)
            return True
        inserted = self._add_node(node.right, value)
        node.right = self._rebalance(node.right)
        return inserted

    def _rebalance(self, node: Node) -> Node:
        """Apply fixes until none fires; return the new subtree root."""
        result = node
        while True:
            needs_pass = False

            if _is_red(result.right) and not _is_red(result.left):
                result = self._promote_right(result)
                needs_pass = True

            if _is_red(result.left) and _is_red(result.left.left):
                result = self._promote_left(result)
                needs_pass = True

            if _is_red(result.left) and _is_red(result.right):
                self._flip_colors(result)
                needs_pass = True

            if not needs_pass:
                return result

    def _promote_right(self, node: Node) -> Node:
        """Lift the red right child above node."""
        right_child = node.right
        node.right = right_child.left
        right_child.left = node

        right_child.color = node.color
        node.color = Color.RED
        return right_child

    def _promote_left(self, node: Node) -> Node:
        """Lift the red left child above node."""
        left_child = node.left
        node.left = left_child.right
        left_child.right = node

        left_child.color = node.color
        node.color = Color.RED
        return left_child

    def _flip_colors(self, node: Node) -> None:
        """Push a red link one level up."""
        node.left.color = Color.BLACK
        node.right.color = Color.BLACK
        node.color = Color.RED
