"""
NodePath: plan tree location for advisories and rendered entries.

Paths are formatted identically regardless of which rule generates them.
"""

from __future__ import annotations


class NodePath:
    """
    Immutable path to a node in the query plan tree.

    Example:
        path = NodePath.root()           # ("Plan",)
        child = path.child(0)            # ("Plan", "Plans[0]")
        grandchild = child.child(2)      # ("Plan", "Plans[0]", "Plans[2]")

        str(grandchild)   # "Plan → Plans[0] → Plans[2]"
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: tuple[str, ...]) -> None:
        self._segments = segments

    @classmethod
    def root(cls) -> "NodePath":
        """Create a path pointing to the root Plan node."""
        return cls(("Plan",))

    def child(self, index: int) -> "NodePath":
        """Navigate to the child at the given index of the node's Plans list."""
        return NodePath(self._segments + (f"Plans[{index}]",))

    def __str__(self) -> str:
        return " → ".join(self._segments)

    def __repr__(self) -> str:
        return f"NodePath({'.'.join(self._segments)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NodePath):
            return self._segments == other._segments
        return False
