"""
Traversal limits for plan trees.

The advisor and the renderer walk caller-supplied trees. These limits
bound the work done on pathological input (a 10,000-level chain, a
100K-sibling fan-out) so that both transforms stay total: when a limit
is reached the walk stops descending and reports the truncation instead
of raising.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TraversalLimits(BaseModel):
    """
    Resource limits applied while walking a plan tree.

    Attributes:
        max_depth: Maximum tree depth (root is depth 1). Children of a
            node at this depth are not visited.
        max_nodes: Maximum number of nodes visited in one walk.

    Example:
        # Use defaults
        limits = TraversalLimits()

        # Stricter limits for a public endpoint
        limits = TraversalLimits(max_depth=50, max_nodes=5_000)
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(
        default=100,
        gt=0,
        description="Maximum tree depth (nesting level)",
    )

    max_nodes: int = Field(
        default=50_000,
        gt=0,
        description="Maximum number of plan nodes visited",
    )


DEFAULT_LIMITS = TraversalLimits()
