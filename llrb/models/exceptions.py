"""
Custom exceptions for tree inspection.
"""


class InvariantViolationError(Exception):
    """
    Raised when an inspected tree breaks a Red-Black invariant.

    Only the inspection tooling raises this; the tree itself never does.
    """

    def __init__(self, invariant: str, value: int | None, detail: str):
        """
        Initialize violation error.

        Args:
            invariant: Short name of the broken invariant.
            value: Value held by the offending node (None for an empty path).
            detail: Human-readable description of what was found.
        """
        self.invariant = invariant
        self.value = value
        self.detail = detail
        super().__init__(f"{invariant} violated at node {value!r}: {detail}")
