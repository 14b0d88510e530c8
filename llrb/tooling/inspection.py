"""
Read-only inspection helpers for RedBlackTree.

These sit outside the container contract: the tree exposes nothing but
add(), so the helpers walk its nodes from the outside for tests, the CLI
and the benchmark. Nothing here mutates a tree.
"""

from collections.abc import Iterator

from llrb.models.exceptions import InvariantViolationError
from llrb.models.sortedcontainers import Color, Node, RedBlackTree


def _root(tree: RedBlackTree) -> Node | None:
    return tree._root


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


def _walk(node: Node | None) -> Iterator[Node]:
    """Yield nodes in ascending order without recursion."""
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def in_order(tree: RedBlackTree) -> list[int]:
    """Return the stored values in ascending order."""
    return [node.value for node in _walk(_root(tree))]


def height(tree: RedBlackTree) -> int:
    """Return the node count on the longest root-to-leaf path (0 when empty)."""

    def _height(node: Node | None) -> int:
        if node is None:
            return 0
        return 1 + max(_height(node.left), _height(node.right))

    return _height(_root(tree))


def _black_height(node: Node | None) -> int:
    if node is None:
        return 0

    left = _black_height(node.left)
    right = _black_height(node.right)
    if left != right:
        raise InvariantViolationError(
            "uniform black-height",
            node.value,
            f"left subtree has {left} black nodes per path, right has {right}",
        )
    return left + (1 if node.color == Color.BLACK else 0)


def black_height(tree: RedBlackTree) -> int:
    """
    Return the number of black nodes on any root-to-empty-subtree path.

    Raises:
        InvariantViolationError: If two paths disagree.
    """
    return _black_height(_root(tree))


def validate(tree: RedBlackTree) -> None:
    """
    Check every Red-Black invariant of the tree.

    Raises:
        InvariantViolationError: Naming the first broken invariant found.
    """
    root = _root(tree)
    if root is None:
        return

    if root.color != Color.BLACK:
        raise InvariantViolationError("black root", root.value, "root is red")

    previous: Node | None = None
    for node in _walk(root):
        if previous is not None and not previous.value < node.value:
            raise InvariantViolationError(
                "search ordering",
                node.value,
                f"follows {previous.value!r} in ascending traversal",
            )
        previous = node

        if _is_red(node.right) and not _is_red(node.left):
            raise InvariantViolationError(
                "left-leaning red links", node.value, "red right child under a black left"
            )
        if _is_red(node.left) and _is_red(node.right):
            raise InvariantViolationError(
                "no two red children", node.value, "both children are red"
            )
        if _is_red(node) and (_is_red(node.left) or _is_red(node.right)):
            raise InvariantViolationError(
                "no red-red link", node.value, "red node has a red child"
            )

    _black_height(root)


def render(tree: RedBlackTree, indent: int = 4) -> str:
    """
    Draw the tree sideways, one node per line.

    The right subtree is printed above its parent and the left subtree
    below, so tilting the head left shows the usual picture.
    """
    lines: list[str] = []

    def _render(node: Node | None, depth: int) -> None:
        if node is None:
            return
        _render(node.right, depth + 1)
        lines.append(f"{' ' * (indent * depth)}{node.value} ({node.color.name})")
        _render(node.left, depth + 1)

    _render(_root(tree), 0)
    return "\n".join(lines)
